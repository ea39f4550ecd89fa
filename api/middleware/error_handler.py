from flask import jsonify
from werkzeug.exceptions import HTTPException
from core.exceptions import (
    DashboardError,
    UserAlreadyExistsError,
    ConfigurationError,
    ValidationError,
    DatabaseError,
    AuthenticationError
)
from core.logging_config import get_logger

logger = get_logger(__name__)

class ErrorHandler:
    """
    Centralized error handling for the dashboard API.
    """

    @staticmethod
    def init_app(app) -> None:
        """Initialize error handlers with Flask app."""

        @app.errorhandler(UserAlreadyExistsError)
        def handle_user_exists(e):
            return jsonify({
                'error': 'User already exists',
                'message': str(e)
            }), 400

        @app.errorhandler(ValidationError)
        def handle_validation_error(e):
            return jsonify({
                'error': 'Validation error',
                'message': str(e),
                'field': e.field
            }), 400

        @app.errorhandler(AuthenticationError)
        def handle_authentication_error(e):
            return jsonify({
                'error': 'Unauthorized',
                'message': str(e)
            }), 401

        @app.errorhandler(ConfigurationError)
        def handle_config_error(e):
            logger.error("Configuration error", error=str(e))
            return jsonify({
                'error': 'Configuration error',
                'message': str(e)
            }), 500

        @app.errorhandler(DatabaseError)
        def handle_database_error(e):
            logger.error("Database error", error=str(e))
            return jsonify({
                'error': 'Database error',
                'message': 'A database error occurred'
            }), 500

        @app.errorhandler(DashboardError)
        def handle_dashboard_error(e):
            logger.error("Dashboard error", error=str(e), error_type=type(e).__name__)
            return jsonify({
                'error': 'Dashboard error',
                'message': str(e)
            }), 500

        @app.errorhandler(404)
        def handle_not_found(e):
            return jsonify({
                'error': 'Not found',
                'message': 'The requested endpoint does not exist'
            }), 404

        @app.errorhandler(405)
        def handle_method_not_allowed(e):
            return jsonify({
                'error': 'Method not allowed',
                'message': 'The HTTP method is not allowed for this endpoint'
            }), 405

        @app.errorhandler(HTTPException)
        def handle_http_error(e):
            return jsonify({
                'error': e.name,
                'message': e.description
            }), e.code

        @app.errorhandler(Exception)
        def handle_generic_error(e):
            logger.exception("Unhandled error", error_type=type(e).__name__)
            return jsonify({
                'error': 'Internal server error',
                'message': 'An unexpected error occurred'
            }), 500
