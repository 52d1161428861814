# petsocial/api/posts/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class PostWriteSchema(Schema):
    """POST /v1/publish and PUT /v1/<post_id>/update request body."""
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(load_default=None)
    description = fields.Str(load_default=None)
    # base64 payload, stored through the image service
    picture = fields.Str(load_default=None)
    pets = fields.List(fields.Str(), load_default=None)


class PopularPostsQuerySchema(Schema):
    """GET /v1/popularPosts?likes=N"""
    class Meta:
        unknown = EXCLUDE

    likes = fields.Int(load_default=1, validate=validate.Range(min=0))


class PostResponseSchema(Schema):
    id = fields.Str(attribute='post_id')
    title = fields.Str()
    description = fields.Str()
    picture = fields.Str(allow_none=True)
    likes = fields.List(fields.Str())
    like_count = fields.Int()
    pets = fields.List(fields.Str())
    user = fields.Str(attribute='user_id')
    created = fields.DateTime(attribute='created_at')
    updated = fields.DateTime(attribute='updated_at')
    enabled = fields.Bool()


class PostListResponseSchema(Schema):
    posts = fields.List(fields.Nested(PostResponseSchema))
