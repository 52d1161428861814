# petsocial/api/auth/routes.py
from flask import Blueprint, request, jsonify, Response, current_app
from flask_jwt_extended import create_access_token, jwt_required, get_jwt_identity, get_jwt

from petsocial.api.auth.schemas import RegisterSchema, SignInSchema, ChangePasswordSchema, TokenResponseSchema

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('/user', methods=['POST'])
def sign_up():
    """Registers a new user (and its profile) and returns a bearer token."""
    auth_service = current_app.services['auth']
    data = RegisterSchema().load(request.get_json(silent=True) or {})
    user_id = auth_service.register(data)
    token = create_access_token(identity=user_id)
    return jsonify(TokenResponseSchema().dump({"token": token})), 200


@auth_bp.route('/user/signin', methods=['POST'])
def sign_in():
    auth_service = current_app.services['auth']
    data = SignInSchema().load(request.get_json(silent=True) or {})
    user_id = auth_service.login(data)
    token = create_access_token(identity=user_id)
    return jsonify(TokenResponseSchema().dump({"token": token})), 200


@auth_bp.route('/user/signout', methods=['GET'])
@jwt_required()
def sign_out():
    """Revokes the token used for this request."""
    current_app.services['auth'].logout(get_jwt())
    return Response(status=200)


@auth_bp.route('/user/password', methods=['POST'])
@jwt_required()
def change_password():
    auth_service = current_app.services['auth']
    data = ChangePasswordSchema().load(request.get_json(silent=True) or {})
    auth_service.change_password(get_jwt_identity(), data)
    return Response(status=200)
