# petsocial/__init__.py

from dotenv import load_dotenv
load_dotenv()

import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
import firebase_admin
from firebase_admin import credentials, firestore

from petsocial.core.config import config_by_name, Settings
from petsocial.core.errors import ApiError
from petsocial.core.validation import flatten_schema_errors
from petsocial.commands import register_commands

from petsocial.api.auth.routes import auth_bp
from petsocial.api.users.routes import users_bp
from petsocial.api.profiles.routes import profiles_bp
from petsocial.api.posts.routes import posts_bp
from petsocial.api.provinces.routes import provinces_bp
from petsocial.api.pets.routes import pets_bp
from petsocial.api.images.routes import images_bp

from petsocial.services.image_service import ImageService
from petsocial.api.provinces.services import ProvinceService
from petsocial.api.users.services import UserService
from petsocial.api.profiles.services import ProfileService
from petsocial.api.auth.services import AuthService
from petsocial.api.posts.services import PostService
from petsocial.api.pets.services import PetService


def _init_firestore(app):
    if not firebase_admin._apps:
        cred_path = app.config['FIREBASE_CREDENTIALS_PATH']
        if not cred_path or not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
        firebase_admin.initialize_app(credentials.Certificate(cred_path))
    return firestore.client()


def create_app(config_name=None, db=None):
    """
    Application factory.

    ``db`` replaces the Firestore client, which is how the tests run the app
    against an in-memory store.
    """
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name]())
    app.json.ensure_ascii = False

    jwt = JWTManager(app)

    if db is None:
        db = _init_firestore(app)

    # Services are wired here and looked up by the routes through app.services.
    settings = Settings.from_mapping(app.config)
    app.services = {}
    app.services['images'] = ImageService(db)
    app.services['provinces'] = ProvinceService(db)
    app.services['users'] = UserService(db, settings)
    app.services['profiles'] = ProfileService(
        db,
        province_service=app.services['provinces'],
        image_service=app.services['images'],
        settings=settings
    )
    app.services['auth'] = AuthService(
        db,
        user_service=app.services['users'],
        profile_service=app.services['profiles'],
        settings=settings
    )
    app.services['posts'] = PostService(
        db,
        user_service=app.services['users'],
        image_service=app.services['images'],
        settings=settings
    )
    app.services['pets'] = PetService(db, image_service=app.services['images'])

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(jwt_header, jwt_payload):
        return app.services['auth'].is_token_revoked(jwt_payload)

    prefix = app.config['API_PREFIX']
    for blueprint in (auth_bp, users_bp, profiles_bp, posts_bp, provinces_bp, pets_bp, images_bp):
        app.register_blueprint(blueprint, url_prefix=prefix)

    register_commands(app)

    @app.errorhandler(SchemaValidationError)
    def handle_marshmallow_validation(err):
        return jsonify({"messages": flatten_schema_errors(err)}), 400

    @app.errorhandler(ApiError)
    def handle_api_error(err):
        if err.status_code >= 500:
            # Missing entities answer with the generic 500 body.
            logging.warning(f"{err.error_code}: {err.message}")
            return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Unexpected server error."}), 500
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return jsonify({"error_code": err.name.upper().replace(' ', '_'), "message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Unexpected server error."}), 500

    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
