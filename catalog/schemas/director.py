from catalog.models.director import Director
from catalog.schemas import ma
from marshmallow import fields, validate

class DirectorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Director

    # present on update, absent on create
    id = fields.Int(allow_none=True, load_default=None)
    first_name = fields.String(required=True, validate=validate.Length(min=1, max=45))
    last_name = fields.String(required=True, validate=validate.Length(min=1, max=45))

# instantiate
director_schema = DirectorSchema()
directors_schema = DirectorSchema(many=True)
