from catalog.models.movie import Movie
from catalog.schemas import ma
from marshmallow import fields, validate

class MovieSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Movie

    # present on update, absent on create
    id = fields.Int(allow_none=True, load_default=None)
    director_id = fields.Int(required=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    release_date = fields.Date(allow_none=True, load_default=None)

    # refreshed by the storage layer, never accepted from callers
    updated_at = fields.AwareDateTime(dump_only=True)


movie_schema = MovieSchema()
movies_schema = MovieSchema(many=True)
