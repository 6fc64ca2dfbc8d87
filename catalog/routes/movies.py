from datetime import date, datetime, timezone
from urllib.parse import urlencode

from flask import Blueprint, request
from marshmallow import ValidationError

from catalog.schemas.movie import movie_schema
from catalog.schemas.projections import flat_movie_directors_schema, movie_director_links_schema
from catalog.services import catalog

# Blueprint gets inserted into flask app
movies_router = Blueprint('movies', __name__, url_prefix='/movies')

def movie_to_hateoas(movie):
    return {
        **movie_schema.dump(movie),
        "_links": {
            "self": f"/api/movies/{movie.id}",
            "update": "/api/movies",
            "delete": f"/api/movies/{movie.id}",
            "director": f"/api/directors/{movie.director_id}"
        }
    }

def parse_timestamp(value):
    # naive timestamps are read as UTC
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

@movies_router.get("")
def read_all_movies():
    # Filtering
    filters = {}
    try:
        released_after = request.args.get("released_after")
        if released_after:
            filters["released_after"] = date.fromisoformat(released_after)

        updated_since = request.args.get("updated_since")
        if updated_since:
            filters["updated_since"] = parse_timestamp(updated_since)
    except ValueError as err:
        return {"error": f"Invalid filter: {err}"}, 400

    # Pagination (zero-based)
    page = catalog.list_movies_filtered(
        page=request.args.get("page", type=int, default=0),
        size=request.args.get("size", type=int),
        **filters
    )

    base_url = "/api/movies"
    params = {k: v for k, v in request.args.items() if k not in ("page", "size")}

    def page_link(index):
        return f"{base_url}?{urlencode({**params, 'page': index, 'size': page.size})}"

    links = {
        "self": page_link(page.page),
        "first": page_link(0),
        "last": page_link(max(page.total_pages - 1, 0)),
        "create": base_url
    }
    if page.has_previous:
        links["prev"] = page_link(page.page - 1)
    if page.has_next:
        links["next"] = page_link(page.page + 1)

    return {
        "count": page.total,
        "page": page.page,
        "size": page.size,
        "total_pages": page.total_pages,
        "items": [movie_to_hateoas(m) for m in page.items],
        "_links": links
    }

@movies_router.get("/<int:movie_id>")
def read_movie(movie_id):
    return movie_to_hateoas(catalog.get_movie(movie_id))

@movies_router.get("/directors/links")
def read_movie_director_links():
    links = catalog.movie_director_links()
    return {
        "count": len(links),
        "items": movie_director_links_schema.dump(links)
    }

@movies_router.get("/directors")
def read_flat_movie_directors():
    rows = catalog.flat_movie_directors()
    return {
        "count": len(rows),
        "items": flat_movie_directors_schema.dump(rows)
    }

@movies_router.post("")
def save_movie():
    try:
        movie_data = movie_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return {"error": err.messages}, 400

    movie = catalog.save_movie(movie_data)
    return movie_to_hateoas(movie), 201 if movie_data.get("id") is None else 200

@movies_router.delete("/<int:movie_id>")
def delete_movie(movie_id):
    catalog.delete_movie(movie_id)
    return "", 204
