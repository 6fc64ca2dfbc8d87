"""Read-only projections over ``movie INNER JOIN director``."""
from collections import namedtuple

from sqlalchemy import select, text

from catalog.models import db
from catalog.models.director import Director
from catalog.models.movie import Movie

MovieDirectorLink = namedtuple("MovieDirectorLink", ["movie_id", "director_id"])

FlatMovieDirector = namedtuple(
    "FlatMovieDirector",
    ["movie_id", "title", "release_date", "director_id", "first_name", "last_name"],
)

# directors grouped together, their movies in id order
flat_movie_directors_query = text("""
    SELECT m.id AS movie_id, m.title, m.release_date,
           d.id AS director_id, d.first_name, d.last_name
    FROM movie m
    INNER JOIN director d ON d.id = m.director_id
    ORDER BY d.id, m.id
""").columns(
    movie_id=db.Integer,
    title=db.String,
    release_date=db.Date,
    director_id=db.Integer,
    first_name=db.String,
    last_name=db.String,
)


def movie_director_links():
    """One (movie id, director id) pair per movie whose director exists, by movie id."""
    query = (
        select(Movie.id.label("movie_id"), Director.id.label("director_id"))
        .select_from(Movie)
        .join(Director, Director.id == Movie.director_id)
        .order_by(Movie.id)
    )
    return [
        MovieDirectorLink(movie_id=row.movie_id, director_id=row.director_id)
        for row in db.session.execute(query)
    ]


def flat_movie_directors():
    """Every joined row flattened, sorted by director id then movie id."""
    return [
        FlatMovieDirector(
            movie_id=row.movie_id,
            title=row.title,
            release_date=row.release_date,
            director_id=row.director_id,
            first_name=row.first_name,
            last_name=row.last_name,
        )
        for row in db.session.execute(flat_movie_directors_query)
    ]
