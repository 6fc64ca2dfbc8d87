from catalog.schemas import ma
from marshmallow import fields

class MovieDirectorLinkSchema(ma.Schema):
    movie_id = fields.Int()
    director_id = fields.Int()

class FlatMovieDirectorSchema(ma.Schema):
    movie_id = fields.Int()
    title = fields.String()
    release_date = fields.Date()
    director_id = fields.Int()
    first_name = fields.String()
    last_name = fields.String()

movie_director_links_schema = MovieDirectorLinkSchema(many=True)
flat_movie_directors_schema = FlatMovieDirectorSchema(many=True)
