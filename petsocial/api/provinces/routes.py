# petsocial/api/provinces/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from petsocial.api.provinces.schemas import ProvinceWriteSchema, ProvinceResponseSchema

provinces_bp = Blueprint('provinces_bp', __name__)


@provinces_bp.route('/province', methods=['GET'])
@jwt_required()
def list_provinces():
    provinces = current_app.services['provinces'].list()
    return jsonify(ProvinceResponseSchema(many=True).dump(provinces)), 200


@provinces_bp.route('/province/<string:province_id>', methods=['GET'])
@jwt_required()
def get_province(province_id: str):
    province = current_app.services['provinces'].find_by_id(province_id)
    return jsonify(ProvinceResponseSchema().dump(province)), 200


@provinces_bp.route('/province', methods=['POST'])
@jwt_required()
def create_province():
    """Admin only."""
    current_app.services['users'].require_admin(get_jwt_identity())
    data = ProvinceWriteSchema().load(request.get_json(silent=True) or {})
    province = current_app.services['provinces'].create(data['name'])
    return jsonify(ProvinceResponseSchema().dump(province)), 201


@provinces_bp.route('/province/<string:province_id>', methods=['PUT'])
@jwt_required()
def update_province(province_id: str):
    current_app.services['users'].require_admin(get_jwt_identity())
    data = ProvinceWriteSchema().load(request.get_json(silent=True) or {})
    province = current_app.services['provinces'].update(province_id, data['name'])
    return jsonify(ProvinceResponseSchema().dump(province)), 200


@provinces_bp.route('/province/<string:province_id>', methods=['DELETE'])
@jwt_required()
def disable_province(province_id: str):
    current_app.services['users'].require_admin(get_jwt_identity())
    province = current_app.services['provinces'].disable(province_id)
    return jsonify(ProvinceResponseSchema().dump(province)), 200
