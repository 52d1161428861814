# petsocial/api/users/routes.py
from flask import Blueprint, request, jsonify, Response, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from petsocial.api.users.schemas import (
    PermissionsSchema,
    UserResponseSchema,
    CurrentUserSchema,
    FollowResponseSchema
)

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('/users/<string:user_id>/grant', methods=['POST'])
@jwt_required()
def grant_permissions(user_id: str):
    """Adds permissions to a user. The caller needs the admin permission."""
    user_service = current_app.services['users']
    user_service.require_admin(get_jwt_identity())
    data = PermissionsSchema().load(request.get_json(silent=True) or {})
    user_service.grant(user_id, data['permissions'])
    return Response(status=200)


@users_bp.route('/users/<string:user_id>/revoke', methods=['POST'])
@jwt_required()
def revoke_permissions(user_id: str):
    user_service = current_app.services['users']
    user_service.require_admin(get_jwt_identity())
    data = PermissionsSchema().load(request.get_json(silent=True) or {})
    user_service.revoke(user_id, data['permissions'])
    return Response(status=200)


@users_bp.route('/users/<string:user_id>/enable', methods=['POST'])
@jwt_required()
def enable_user(user_id: str):
    user_service = current_app.services['users']
    user_service.require_admin(get_jwt_identity())
    user_service.enable(user_id)
    return Response(status=200)


@users_bp.route('/users/<string:user_id>/disable', methods=['POST'])
@jwt_required()
def disable_user(user_id: str):
    user_service = current_app.services['users']
    user_service.require_admin(get_jwt_identity())
    user_service.disable(user_id)
    return Response(status=200)


@users_bp.route('/users', methods=['GET'])
@jwt_required()
def get_all():
    user_service = current_app.services['users']
    user_service.require_admin(get_jwt_identity())
    users = user_service.find_all()
    return jsonify(UserResponseSchema(many=True).dump(users)), 200


@users_bp.route('/users/current', methods=['GET'])
@jwt_required()
def current():
    """Current user with its following list and the id of its profile."""
    user_id = get_jwt_identity()
    user = current_app.services['users'].find_by_id(user_id)
    profile = current_app.services['profiles'].read(user_id)
    return jsonify(CurrentUserSchema().dump({
        "user_id": user.user_id,
        "name": user.name,
        "login": user.login,
        "permissions": user.permissions,
        "following": user.following,
        "profile": profile.profile_id
    })), 200


@users_bp.route('/users/<string:user_id>/follow', methods=['POST'])
@jwt_required()
def follow_user(user_id: str):
    caller_id = get_jwt_identity()
    followed = current_app.services['users'].follow(caller_id, user_id)
    return jsonify(FollowResponseSchema().dump(followed)), 200


@users_bp.route('/users/<string:user_id>/unfollow', methods=['POST'])
@jwt_required()
def unfollow_user(user_id: str):
    unfollowed = current_app.services['users'].unfollow(get_jwt_identity(), user_id)
    return jsonify(FollowResponseSchema().dump(unfollowed)), 200
