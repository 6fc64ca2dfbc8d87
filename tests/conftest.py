from datetime import date, datetime, timezone

import pytest

from catalog import create_app
from catalog.config import TestConfig
from catalog.models import db
from tests.helpers import add_director, add_movie


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return app.extensions["catalog"]


@pytest.fixture
def two_directors_two_movies_each(app):
    """Directors 1 and 2, movies inserted interleaved so id order differs from grouping."""
    nolan = add_director("Christopher", "Nolan")
    villeneuve = add_director("Denis", "Villeneuve")
    add_movie("Dune", villeneuve.id, date(2021, 9, 15),
              datetime(2024, 1, 1, tzinfo=timezone.utc))
    add_movie("Inception", nolan.id, date(2010, 7, 16),
              datetime(2024, 2, 1, tzinfo=timezone.utc))
    add_movie("Arrival", villeneuve.id, date(2016, 11, 9),
              datetime(2024, 3, 1, tzinfo=timezone.utc))
    add_movie("Tenet", nolan.id, date(2020, 8, 26),
              datetime(2024, 4, 1, tzinfo=timezone.utc))
    return nolan.id, villeneuve.id
