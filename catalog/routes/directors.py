from urllib.parse import urlencode

from flask import Blueprint, request
from marshmallow import ValidationError

from catalog.schemas.director import director_schema
from catalog.services import catalog

# Blueprint gets inserted into flask app
directors_router = Blueprint('directors', __name__, url_prefix='/directors')

def director_to_hateoas(director):
    return {
        **director_schema.dump(director),
        "_links": {
            "self": f"/api/directors/{director.id}",
            "update": "/api/directors",
            "delete": f"/api/directors/{director.id}"
        }
    }

def directors_listing(directors, self_link):
    return {
        "count": len(directors),
        "items": [director_to_hateoas(d) for d in directors],
        "_links": {
            "self": self_link,
            "create": "/api/directors"
        }
    }

@directors_router.get("/ordered")
def read_directors_ordered():
    return directors_listing(catalog.list_directors_ordered(), "/api/directors/ordered")

@directors_router.get("")
def read_directors_by_last_name():
    last_name = request.args.get("last_name")
    if last_name is None:
        return {"error": "Missing required parameter: last_name"}, 400
    return directors_listing(
        catalog.list_directors_by_last_name(last_name),
        f"/api/directors?{urlencode({'last_name': last_name})}"
    )

@directors_router.get("/<int:director_id>")
def read_director(director_id):
    return director_to_hateoas(catalog.get_director(director_id))

@directors_router.post("")
def save_director():
    try:
        director_data = director_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return {"error": err.messages}, 400

    director = catalog.save_director(director_data)
    return director_to_hateoas(director), 201 if director_data.get("id") is None else 200

@directors_router.delete("/<int:director_id>")
def delete_director(director_id):
    catalog.delete_director(director_id)
    return "", 204
