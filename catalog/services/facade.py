import logging
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import select
from sqlalchemy.orm.attributes import flag_modified

from catalog.errors import DirectorNotFound, MovieNotFound
from catalog.models import db
from catalog.models.director import Director
from catalog.models.movie import Movie
from catalog.services import filters, projections
from catalog.services.queries import find_movies, page_request

logger = logging.getLogger(__name__)


class Catalog:
    """Entry point for the serving layer: movies, directors and their joins."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        # paging limits stay in app.config, read per call
        app.config.setdefault("DEFAULT_PAGE_SIZE", 20)
        app.config.setdefault("MAX_PAGE_SIZE", 2000)
        app.extensions["catalog"] = self

    # ---------------- MOVIES ----------------
    def get_movie(self, movie_id):
        return self._get_or_raise(Movie, movie_id, MovieNotFound)

    def list_movies_filtered(self, page=None, size=None, released_after=None, updated_since=None):
        window = page_request(
            page, size,
            current_app.config["DEFAULT_PAGE_SIZE"],
            current_app.config["MAX_PAGE_SIZE"],
        )
        predicates = filters.active_filters(
            filters.released_after(released_after),
            filters.updated_since(updated_since),
        )
        return find_movies(window, predicates)

    def save_movie(self, movie_data):
        movie_id = movie_data.get("id")
        with self._unit_of_work():
            if movie_id is None:
                movie = Movie()
                db.session.add(movie)
            else:
                movie = self._lock_or_raise(Movie, movie_id, MovieNotFound)
            movie.director_id = movie_data.get("director_id")
            movie.title = movie_data.get("title")
            movie.release_date = movie_data.get("release_date")
            if movie_id is not None:
                # emit the UPDATE even when nothing changed so updated_at is refreshed
                flag_modified(movie, "title")
        logger.info("movie %s %s", movie.id, "created" if movie_id is None else "updated")
        return movie

    def delete_movie(self, movie_id):
        with self._unit_of_work():
            db.session.delete(self._lock_or_raise(Movie, movie_id, MovieNotFound))
        logger.info("movie %s deleted", movie_id)

    def movie_director_links(self):
        links = projections.movie_director_links()
        logger.debug("movie-director links -> %d rows", len(links))
        return links

    def flat_movie_directors(self):
        rows = projections.flat_movie_directors()
        logger.debug("flat movie-directors -> %d rows", len(rows))
        return rows

    # ---------------- DIRECTORS ----------------
    def get_director(self, director_id):
        return self._get_or_raise(Director, director_id, DirectorNotFound)

    def list_directors_ordered(self):
        query = select(Director).order_by(Director.last_name, Director.first_name, Director.id)
        return db.session.scalars(query).all()

    def list_directors_by_last_name(self, last_name):
        query = select(Director).where(Director.last_name == last_name).order_by(Director.id)
        return db.session.scalars(query).all()

    def save_director(self, director_data):
        director_id = director_data.get("id")
        with self._unit_of_work():
            if director_id is None:
                director = Director()
                db.session.add(director)
            else:
                director = self._lock_or_raise(Director, director_id, DirectorNotFound)
            director.first_name = director_data.get("first_name")
            director.last_name = director_data.get("last_name")
        logger.info("director %s %s", director.id, "created" if director_id is None else "updated")
        return director

    def delete_director(self, director_id):
        # movies keep their director_id and simply drop out of the joins
        with self._unit_of_work():
            db.session.delete(self._lock_or_raise(Director, director_id, DirectorNotFound))
        logger.info("director %s deleted", director_id)

    # ---------------- HELPERS ----------------
    @contextmanager
    def _unit_of_work(self):
        """Existence check and write commit or roll back together."""
        try:
            yield db.session
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def _get_or_raise(self, model, entity_id, error):
        entity = db.session.get(model, entity_id)
        if entity is None:
            logger.warning("%s %s not found", error.kind.lower(), entity_id)
            raise error(entity_id)
        return entity

    def _lock_or_raise(self, model, entity_id, error):
        query = (
            select(model)
            .where(model.id == entity_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        entity = db.session.scalars(query).one_or_none()
        if entity is None:
            logger.warning("%s %s not found", error.kind.lower(), entity_id)
            raise error(entity_id)
        return entity
