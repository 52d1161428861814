# petsocial/api/users/schemas.py
from marshmallow import Schema, fields, EXCLUDE


class PermissionsSchema(Schema):
    """POST /v1/users/<user_id>/grant|revoke request body."""
    class Meta:
        unknown = EXCLUDE

    permissions = fields.List(fields.Str(), load_default=None)


class UserResponseSchema(Schema):
    """Admin listing entry. Never exposes the password hash."""
    id = fields.Str(attribute='user_id')
    name = fields.Str()
    login = fields.Str()
    permissions = fields.List(fields.Str())
    enabled = fields.Bool()


class CurrentUserSchema(Schema):
    """GET /v1/users/current"""
    id = fields.Str(attribute='user_id')
    name = fields.Str()
    login = fields.Str()
    permissions = fields.List(fields.Str())
    following = fields.List(fields.Str())
    profile = fields.Str(allow_none=True)


class FollowResponseSchema(Schema):
    """The user that was followed or unfollowed."""
    id = fields.Str(attribute='user_id')
    name = fields.Str()
