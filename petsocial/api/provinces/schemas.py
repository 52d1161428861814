# petsocial/api/provinces/schemas.py
from marshmallow import Schema, fields, EXCLUDE


class ProvinceWriteSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default=None)


class ProvinceResponseSchema(Schema):
    id = fields.Str(attribute='province_id')
    name = fields.Str()
    enabled = fields.Bool()
