"""
JWT middleware gating the dashboard API behind a bearer token.
"""

from functools import wraps
from typing import Optional, Dict, Any
from flask import request, jsonify, g
from api.context import get_service
from service.auth_service import AuthService
from core.exceptions import AuthenticationError

class JWTMiddleware:
    """
    Stateless bearer-token check. The decoded identity is attached to
    ``flask.g.current_user``; nothing is stored server-side.
    """

    @staticmethod
    def require_auth(f):
        """Decorator to require JWT authentication for protected endpoints."""
        @wraps(f)
        def decorated_function(*args, **kwargs):
            token = JWTMiddleware._extract_token(request)

            if not token:
                return jsonify({
                    'error': 'Unauthorized',
                    'message': 'Please provide Authorization header with Bearer token'
                }), 401

            try:
                g.current_user = JWTMiddleware._get_auth_service().verify_token(token)
            except AuthenticationError as e:
                return jsonify({
                    'error': 'Invalid token',
                    'message': str(e)
                }), 401

            return f(*args, **kwargs)

        return decorated_function

    @staticmethod
    def _extract_token(request) -> Optional[str]:
        """Extract JWT token from Authorization header."""
        auth_header = request.headers.get('Authorization')

        if not auth_header:
            return None

        parts = auth_header.split(' ')
        if len(parts) != 2 or parts[0].lower() != 'bearer' or not parts[1]:
            return None

        return parts[1]

    @staticmethod
    def _get_auth_service() -> AuthService:
        return get_service('auth_service')

    @staticmethod
    def get_current_user() -> Optional[Dict[str, Any]]:
        """Get current authenticated user from Flask g object."""
        return getattr(g, 'current_user', None)
