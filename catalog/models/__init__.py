from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from catalog.models.director import Director  # noqa: E402
from catalog.models.movie import Movie  # noqa: E402
