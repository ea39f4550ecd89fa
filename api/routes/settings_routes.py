from flask import Blueprint, request, jsonify, g
from api.context import get_service
from api.middleware.jwt_middleware import JWTMiddleware
from service.settings_service import SettingsService
from service.requests import SettingsUpdate

settings_bp = Blueprint('settings', __name__)

def get_settings_service() -> SettingsService:
    return get_service('settings_service')

@settings_bp.route('', methods=['GET'])
@JWTMiddleware.require_auth
def get_settings():
    return jsonify(get_settings_service().get_settings().to_dict()), 200

@settings_bp.route('', methods=['POST'])
@JWTMiddleware.require_auth
def update_settings():
    """
    Replace the dashboard settings.

    Request body:
    {
        "data_limit_gb": float,
        "alerts_enabled": bool
    }
    """
    update = SettingsUpdate.from_json(request.get_json(silent=True))
    settings = get_settings_service().update_settings(update, g.current_user['username'])
    return jsonify(settings.to_dict()), 200
