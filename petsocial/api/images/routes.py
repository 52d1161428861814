# petsocial/api/images/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required

from petsocial.api.images.schemas import ImageCreateSchema, ImageResponseSchema

images_bp = Blueprint('images_bp', __name__)


@images_bp.route('/image', methods=['POST'])
@jwt_required()
def create_image():
    """Stores a base64 image and returns its id."""
    data = ImageCreateSchema().load(request.get_json(silent=True) or {})
    image = current_app.services['images'].create(data['image'])
    return jsonify({"id": image.image_id}), 201


@images_bp.route('/image/<string:image_id>', methods=['GET'])
@jwt_required()
def get_image(image_id: str):
    image = current_app.services['images'].find_by_id(image_id)
    return jsonify(ImageResponseSchema().dump(image)), 200
