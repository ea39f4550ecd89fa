"""
Authentication routes: account signup and JWT login.
"""

from flask import Blueprint, request, jsonify
from api.context import get_service
from service.auth_service import AuthService
from service.requests import SignupRequest, LoginRequest
from core.exceptions import InvalidCredentialsError, ValidationError

auth_bp = Blueprint('auth', __name__)

def get_auth_service() -> AuthService:
    return get_service('auth_service')

@auth_bp.route('/signup', methods=['POST'])
def signup():
    """
    Create a dashboard account.

    Request body:
    {
        "username": "string",
        "email": "string",
        "password": "string"
    }
    """
    signup_request = SignupRequest.from_json(request.get_json(silent=True))
    result = get_auth_service().signup(signup_request)
    return jsonify(result), 200

@auth_bp.route('/login', methods=['POST'])
def login():
    """
    Authenticate by email and password and return a JWT token.

    Request body:
    {
        "email": "string",
        "password": "string"
    }
    """
    try:
        login_request = LoginRequest.from_json(request.get_json(silent=True))
    except ValidationError:
        return jsonify({
            'error': 'Missing credentials',
            'message': 'Email and password are required'
        }), 400

    try:
        result = get_auth_service().login(login_request)
        return jsonify(result), 200

    except InvalidCredentialsError as e:
        return jsonify({
            'error': 'Invalid credentials',
            'message': str(e)
        }), 401
