# petsocial/api/images/schemas.py
from marshmallow import Schema, fields, EXCLUDE


class ImageCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    image = fields.Str(load_default=None)


class ImageResponseSchema(Schema):
    id = fields.Str(attribute='image_id')
    image = fields.Str()
