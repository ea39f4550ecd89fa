"""
JWT service for stateless bearer-token authentication.
"""

import jwt
from typing import Dict, Any
from datetime import datetime, timedelta, timezone
from core.exceptions import AuthenticationError, ConfigurationError

class JWTService:
    """
    Lightweight JWT service for the traffic dashboard.
    Issues and verifies signed tokens; there is no server-side session or
    revocation state.
    """

    def __init__(self, secret_key: str, token_expiry_hours: int = 24):
        if not secret_key:
            raise ConfigurationError("JWT secret key is required")
        self.secret_key = secret_key
        self.algorithm = 'HS256'
        self.token_expiry_hours = token_expiry_hours

    def generate_token(self, user_id: int, username: str) -> Dict[str, Any]:
        """
        Generate a signed token carrying the user's identity.
        """
        now = datetime.now(timezone.utc)

        payload = {
            'user_id': user_id,
            'username': username,
            'iat': int(now.timestamp()),
            'exp': int((now + timedelta(hours=self.token_expiry_hours)).timestamp())
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

        return {
            'token': token,
            'expires_in': self.token_expiry_hours * 3600,
            'expires_at': payload['exp']
        }

    def validate_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry, returning the decoded identity.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]}
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        for field in ('user_id', 'username'):
            if field not in payload:
                raise AuthenticationError(f"Token missing required field: {field}")

        return {
            'user_id': payload['user_id'],
            'username': payload['username']
        }
