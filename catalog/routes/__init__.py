from flask import Blueprint

from catalog.routes.directors import directors_router
from catalog.routes.movies import movies_router

routes = Blueprint('api', __name__, url_prefix='/api')

routes.register_blueprint(directors_router)
routes.register_blueprint(movies_router)
