# petsocial/api/pets/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from petsocial.api.pets.schemas import PetWriteSchema, PetResponseSchema

pets_bp = Blueprint('pets_bp', __name__)


@pets_bp.route('/pet', methods=['GET'])
@jwt_required()
def my_pets():
    """Pets of the current user."""
    pet_service = current_app.services['pets']
    pets = pet_service.find_by_current_user(get_jwt_identity())
    return jsonify(PetResponseSchema(many=True).dump([pet_service.to_response(p) for p in pets])), 200


@pets_bp.route('/pet', methods=['POST'])
@jwt_required()
def register_pet():
    pet_service = current_app.services['pets']
    data = PetWriteSchema().load(request.get_json(silent=True) or {})
    pet = pet_service.create(get_jwt_identity(), data)
    return jsonify(PetResponseSchema().dump(pet_service.to_response(pet))), 201


@pets_bp.route('/pet/<string:pet_id>', methods=['GET'])
@jwt_required()
def get_pet(pet_id: str):
    pet_service = current_app.services['pets']
    pet = pet_service.find_by_id(pet_id)
    return jsonify(PetResponseSchema().dump(pet_service.to_response(pet))), 200


@pets_bp.route('/pet/<string:pet_id>', methods=['PUT'])
@jwt_required()
def update_pet(pet_id: str):
    """Owner only."""
    pet_service = current_app.services['pets']
    data = PetWriteSchema().load(request.get_json(silent=True) or {})
    pet = pet_service.update(get_jwt_identity(), pet_id, data)
    return jsonify(PetResponseSchema().dump(pet_service.to_response(pet))), 200


@pets_bp.route('/pet/<string:pet_id>', methods=['DELETE'])
@jwt_required()
def remove_pet(pet_id: str):
    pet_service = current_app.services['pets']
    pet = pet_service.remove(get_jwt_identity(), pet_id)
    return jsonify(PetResponseSchema().dump(pet_service.to_response(pet))), 200
