# petsocial/api/auth/schemas.py
from marshmallow import Schema, fields, EXCLUDE


class RegisterSchema(Schema):
    """POST /v1/user request body. Length rules are enforced by AuthService."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default=None)
    login = fields.Str(load_default=None)
    password = fields.Str(load_default=None)


class SignInSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    login = fields.Str(load_default=None)
    password = fields.Str(load_default=None)


class ChangePasswordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    current_password = fields.Str(load_default=None)
    new_password = fields.Str(load_default=None)


class TokenResponseSchema(Schema):
    token = fields.Str(required=True)
