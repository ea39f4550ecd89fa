#!/usr/bin/env python3
from typing import Optional
from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO

from config.app_config import AppConfig
from core.dependency_container import DependencyContainer, build_container
from core.logging_config import setup_structured_logging, get_logger
from .context import EXTENSION_KEY, get_service
from .routes.auth_routes import auth_bp
from .routes.traffic_routes import traffic_bp
from .routes.settings_routes import settings_bp
from .middleware.error_handler import ErrorHandler
from .socket_events import register_socket_events

logger = get_logger(__name__)

def create_app(config: Optional[AppConfig] = None) -> Flask:
    """
    Creates and configures the Flask application and its Socket.IO server.
    The simulator is not started here; see ``start_simulator``.
    """
    if config is None:
        config = AppConfig.from_env(".env")
    config.validate()
    setup_structured_logging(config.logging.log_level)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.security.jwt_secret
    app.json.sort_keys = False

    CORS(app, origins=config.server.cors_origins)

    container = build_container(config)
    container.get('database')
    app.extensions[EXTENSION_KEY] = container

    ErrorHandler.init_app(app)

    # API routes
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(traffic_bp, url_prefix='/api/traffic')
    app.register_blueprint(settings_bp, url_prefix='/api/settings')

    @app.route("/api/health")
    def health_check():
        return jsonify({
            "status": "healthy",
            "subscribers": len(get_service('subscriber_registry'))
        })

    socketio = SocketIO(app, async_mode='threading', cors_allowed_origins=config.server.cors_origins)
    register_socket_events(socketio, container.get('subscriber_registry'))

    logger.info("Application created", database=config.database.path)
    return app

def get_socketio(app: Flask) -> SocketIO:
    return app.extensions['socketio']

def start_simulator(app: Flask) -> None:
    container: DependencyContainer = app.extensions[EXTENSION_KEY]
    if not container.config.generator.enabled:
        logger.info("Traffic simulator disabled by configuration")
        return
    container.get('traffic_simulator').start(get_socketio(app))

def main() -> None:
    app = create_app()
    container: DependencyContainer = app.extensions[EXTENSION_KEY]
    server = container.config.server

    logger.info("Starting traffic dashboard server", host=server.host, port=server.port)
    start_simulator(app)
    try:
        get_socketio(app).run(
            app,
            host=server.host,
            port=server.port,
            debug=server.debug,
            use_reloader=False,
            allow_unsafe_werkzeug=True
        )
    finally:
        container.cleanup()

if __name__ == "__main__":
    main()
