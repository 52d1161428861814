# petsocial/api/profiles/schemas.py
from marshmallow import Schema, fields, EXCLUDE

from petsocial.api.posts.schemas import PostResponseSchema


class ProfileUpdateSchema(Schema):
    """POST /v1/profile request body."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default=None)
    phone = fields.Str(load_default=None)
    email = fields.Str(load_default=None)
    address = fields.Str(load_default=None)
    province = fields.Str(load_default=None, allow_none=True)


class ProfilePictureSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    image = fields.Str(load_default=None)


class ProfileSearchQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default="")


class ProfileResponseSchema(Schema):
    id = fields.Str(attribute='profile_id', allow_none=True)
    user = fields.Str(attribute='user_id', allow_none=True)
    name = fields.Str()
    phone = fields.Str()
    email = fields.Str()
    address = fields.Str()
    province = fields.Str(attribute='province_id', allow_none=True)
    picture = fields.Str(allow_none=True)


class PublicProfileResponseSchema(Schema):
    """GET /v1/profile/<user_id>: contact details are left out, posts are included."""
    name = fields.Str()
    phone = fields.Str()
    province = fields.Str(attribute='province_id', allow_none=True)
    picture = fields.Str(allow_none=True)
    posts = fields.List(fields.Nested(PostResponseSchema))
