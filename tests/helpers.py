from sqlalchemy import update

from catalog.models import db
from catalog.models.director import Director
from catalog.models.movie import Movie


def add_director(first_name, last_name):
    director = Director(first_name=first_name, last_name=last_name)
    db.session.add(director)
    db.session.commit()
    return director


def add_movie(title, director_id, release_date=None, updated_at=None):
    movie = Movie(title=title, director_id=director_id, release_date=release_date)
    db.session.add(movie)
    db.session.commit()
    if updated_at is not None:
        set_updated_at(movie.id, updated_at)
    return movie


def set_updated_at(movie_id, timestamp):
    db.session.execute(update(Movie).where(Movie.id == movie_id).values(updated_at=timestamp))
    db.session.commit()
