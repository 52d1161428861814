# petsocial/api/posts/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from petsocial.api.posts.schemas import (
    PostWriteSchema,
    PopularPostsQuerySchema,
    PostResponseSchema,
    PostListResponseSchema
)

posts_bp = Blueprint('posts_bp', __name__)


def _post_list(posts):
    return jsonify(PostListResponseSchema().dump({"posts": posts})), 200


@posts_bp.route('/allPosts', methods=['GET'])
@jwt_required()
def get_all_posts():
    return _post_list(current_app.services['posts'].find_all())


@posts_bp.route('/myPosts', methods=['GET'])
@jwt_required()
def my_posts():
    return _post_list(current_app.services['posts'].find_all_by_user_id(get_jwt_identity()))


@posts_bp.route('/myFeed', methods=['GET'])
@jwt_required()
def my_feed():
    """Posts of the users the caller follows, newest first."""
    return _post_list(current_app.services['posts'].find_my_feed_posts(get_jwt_identity()))


@posts_bp.route('/popularPosts', methods=['GET'])
@jwt_required()
def popular_posts():
    query = PopularPostsQuerySchema().load(request.args)
    return _post_list(current_app.services['posts'].find_post_by_like_amount(query['likes']))


@posts_bp.route('/posts/<string:post_id>', methods=['GET'])
@jwt_required()
def get_post(post_id: str):
    post = current_app.services['posts'].find_by_id(post_id)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/publish', methods=['POST'])
@jwt_required()
def publish():
    data = PostWriteSchema().load(request.get_json(silent=True) or {})
    post = current_app.services['posts'].publish(get_jwt_identity(), data)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>/update', methods=['PUT'])
@jwt_required()
def update_post(post_id: str):
    data = PostWriteSchema().load(request.get_json(silent=True) or {})
    post = current_app.services['posts'].update_post(get_jwt_identity(), post_id, data)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>/delete', methods=['DELETE'])
@jwt_required()
def delete_post(post_id: str):
    post = current_app.services['posts'].delete_post(get_jwt_identity(), post_id)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>/like', methods=['POST'])
@jwt_required()
def like_post(post_id: str):
    post = current_app.services['posts'].like(get_jwt_identity(), post_id)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>/dislike', methods=['POST'])
@jwt_required()
def dislike_post(post_id: str):
    post = current_app.services['posts'].dislike(get_jwt_identity(), post_id)
    return jsonify(PostResponseSchema().dump(post)), 200
