# petsocial/api/pets/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from petsocial.models.pet import PetGender


class PetWriteSchema(Schema):
    """POST /v1/pet and PUT /v1/pet/<pet_id> request body."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default=None)
    description = fields.Str(load_default=None)
    gender = fields.Str(load_default=None, validate=validate.OneOf([e.value for e in PetGender]))
    birth_date = fields.Date(load_default=None, format="%Y-%m-%d")
    picture = fields.Str(load_default=None)


class PetResponseSchema(Schema):
    id = fields.Str()
    user = fields.Str()
    name = fields.Str()
    description = fields.Str()
    gender = fields.Str(allow_none=True)
    birth_date = fields.Date(allow_none=True)
    picture = fields.Str(allow_none=True)
    enabled = fields.Bool()
