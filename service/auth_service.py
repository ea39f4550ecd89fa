"""
Authentication service: account signup, login and bearer-token verification.
"""

from typing import Dict, Any
from data.user_repository import UserRepository
from core.jwt_service import JWTService
from core.exceptions import InvalidCredentialsError
from core.logging_config import LoggerMixin
from .requests import SignupRequest, LoginRequest

class AuthService(LoggerMixin):
    """
    Service layer for authentication operations.
    """

    def __init__(self, user_repo: UserRepository, jwt_service: JWTService):
        self.user_repo = user_repo
        self.jwt_service = jwt_service

    def signup(self, request: SignupRequest) -> Dict[str, Any]:
        """
        Create a new account. Duplicate username or email raises
        UserAlreadyExistsError.
        """
        user_id = self.user_repo.create_user(request.username, request.email, request.password)
        self.logger.info("User signed up", user_id=user_id, username=request.username)
        return {'success': True}

    def login(self, request: LoginRequest) -> Dict[str, Any]:
        """
        Authenticate by email and password and issue a signed token.
        """
        user = self.user_repo.verify_credentials(request.email, request.password)
        if not user:
            self.logger.info("Login rejected")
            raise InvalidCredentialsError()

        token_data = self.jwt_service.generate_token(user.id, user.username)
        self.logger.info("User logged in", user_id=user.id)

        return {
            'token': token_data['token'],
            'expires_in': token_data['expires_in'],
            'user': user.public_dict()
        }

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry; no server-side session lookup is made.
        """
        return self.jwt_service.validate_token(token)
