from catalog.models import db
from catalog.models.types import UTCDateTime, utcnow

class Movie(db.Model):
    __tablename__ = "movie"

    id = db.Column(db.Integer, primary_key=True)
    # plain reference, no FK constraint: a movie may outlive its director
    director_id = db.Column(db.Integer, index=True)
    title = db.Column(db.String(255), nullable=False)
    release_date = db.Column(db.Date)

    updated_at = db.Column(
        UTCDateTime,
        default=utcnow,  # on insert
        onupdate=utcnow,  # on every UPDATE
        nullable=False
    )

    def __repr__(self):
        return f"<Movie id={self.id} title={self.title!r} director_id={self.director_id}>"
