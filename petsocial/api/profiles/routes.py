# petsocial/api/profiles/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from petsocial.api.profiles.schemas import (
    ProfileUpdateSchema,
    ProfilePictureSchema,
    ProfileSearchQuerySchema,
    ProfileResponseSchema,
    PublicProfileResponseSchema
)

profiles_bp = Blueprint('profiles_bp', __name__)


@profiles_bp.route('/profile', methods=['GET'])
@jwt_required()
def current():
    """Profile of the caller; an empty profile when none exists yet."""
    profile = current_app.services['profiles'].read(get_jwt_identity())
    return jsonify(ProfileResponseSchema().dump(profile)), 200


@profiles_bp.route('/profile', methods=['POST'])
@jwt_required()
def update_basic_info():
    data = ProfileUpdateSchema().load(request.get_json(silent=True) or {})
    profile = current_app.services['profiles'].update_basic_info(get_jwt_identity(), data)
    return jsonify(ProfileResponseSchema().dump(profile)), 200


@profiles_bp.route('/profile/picture', methods=['POST'])
@jwt_required()
def update_profile_picture():
    data = ProfilePictureSchema().load(request.get_json(silent=True) or {})
    profile = current_app.services['profiles'].update_profile_picture(get_jwt_identity(), data['image'])
    return jsonify(ProfileResponseSchema().dump(profile)), 200


@profiles_bp.route('/profile/find', methods=['GET'])
@jwt_required()
def find_profile_by_name():
    """Profiles whose name, or whose user's name, contains ?name=. The caller is left out."""
    query = ProfileSearchQuerySchema().load(request.args)
    profiles = current_app.services['profiles'].find_profile_by_query_name(query['name'], get_jwt_identity())
    return jsonify(ProfileResponseSchema(many=True).dump(profiles)), 200


@profiles_bp.route('/profile/following', methods=['GET'])
@jwt_required()
def following_profiles():
    user_id = get_jwt_identity()
    following = current_app.services['users'].get_following(user_id)
    profiles = current_app.services['profiles'].find_for_users(following)
    return jsonify(ProfileResponseSchema(many=True).dump(profiles)), 200


@profiles_bp.route('/profile/id/<string:profile_id>', methods=['GET'])
@jwt_required()
def find_profile_by_id(profile_id: str):
    profile = current_app.services['profiles'].find_profile_by_id(profile_id)
    return jsonify(ProfileResponseSchema().dump(profile)), 200


@profiles_bp.route('/profile/<string:user_id>', methods=['GET'])
@jwt_required()
def see_profile(user_id: str):
    profile = current_app.services['profiles'].see_profile(user_id)
    posts = current_app.services['posts'].find_all_by_user_id(user_id)
    return jsonify(PublicProfileResponseSchema().dump({
        "name": profile.name,
        "phone": profile.phone,
        "province_id": profile.province_id,
        "picture": profile.picture,
        "posts": posts
    })), 200
