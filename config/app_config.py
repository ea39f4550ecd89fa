"""
Centralized application configuration management.
Provides type-safe configuration with environment variable support.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple
from pathlib import Path
from dotenv import load_dotenv

from core.exceptions import ConfigurationError
from .constants import GeneratorDefaults

MIN_SECRET_LENGTH = 32

def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")

def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())

@dataclass
class DatabaseConfig:
    """Database configuration settings."""
    path: str = "traffic.db"

@dataclass
class SecurityConfig:
    """Security configuration settings."""
    jwt_secret: Optional[str] = None
    token_expiry_hours: int = 24
    bcrypt_rounds: int = 12

@dataclass
class ServerConfig:
    """Server configuration settings."""
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    cors_origins: str = "*"

@dataclass
class GeneratorConfig:
    """Traffic simulator configuration settings."""
    enabled: bool = True
    interval_seconds: float = GeneratorDefaults.INTERVAL_SECONDS
    max_upload_bytes: int = GeneratorDefaults.MAX_UPLOAD_BYTES
    max_download_bytes: int = GeneratorDefaults.MAX_DOWNLOAD_BYTES
    source_prefix: str = GeneratorDefaults.SOURCE_PREFIX
    destination_prefix: str = GeneratorDefaults.DESTINATION_PREFIX
    domains: Tuple[str, ...] = GeneratorDefaults.DOMAINS
    protocols: Tuple[str, ...] = GeneratorDefaults.PROTOCOLS

@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    log_level: str = "INFO"

@dataclass
class AppConfig:
    """Main application configuration."""
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'AppConfig':
        """Load configuration from environment variables."""
        if env_file and os.path.exists(env_file):
            load_dotenv(env_file)

        try:
            return cls(
                database=DatabaseConfig(
                    path=os.getenv("DATABASE_PATH", "traffic.db"),
                ),
                security=SecurityConfig(
                    jwt_secret=os.getenv("JWT_SECRET"),
                    token_expiry_hours=int(os.getenv("TOKEN_EXPIRY_HOURS", "24")),
                    bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
                ),
                server=ServerConfig(
                    host=os.getenv("SERVER_HOST", "0.0.0.0"),
                    port=int(os.getenv("API_PORT", "3000")),
                    debug=_env_bool("DEBUG", "false"),
                    cors_origins=os.getenv("CORS_ORIGINS", "*"),
                ),
                generator=GeneratorConfig(
                    enabled=_env_bool("GENERATOR_ENABLED", "true"),
                    interval_seconds=float(os.getenv("GENERATOR_INTERVAL", str(GeneratorDefaults.INTERVAL_SECONDS))),
                    max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(GeneratorDefaults.MAX_UPLOAD_BYTES))),
                    max_download_bytes=int(os.getenv("MAX_DOWNLOAD_BYTES", str(GeneratorDefaults.MAX_DOWNLOAD_BYTES))),
                    source_prefix=os.getenv("SOURCE_PREFIX", GeneratorDefaults.SOURCE_PREFIX),
                    destination_prefix=os.getenv("DESTINATION_PREFIX", GeneratorDefaults.DESTINATION_PREFIX),
                    domains=_env_list("GENERATOR_DOMAINS", GeneratorDefaults.DOMAINS),
                    protocols=_env_list("GENERATOR_PROTOCOLS", GeneratorDefaults.PROTOCOLS),
                ),
                logging=LoggingConfig(
                    log_level=os.getenv("LOG_LEVEL", "INFO"),
                ),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric configuration value: {e}")

    def validate(self) -> None:
        """Validate configuration settings."""
        secret = self.security.jwt_secret
        if not secret:
            raise ConfigurationError("JWT_SECRET is required")
        if len(secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(f"JWT_SECRET must be at least {MIN_SECRET_LENGTH} characters long")
        if self.security.token_expiry_hours <= 0:
            raise ConfigurationError("TOKEN_EXPIRY_HOURS must be positive")

        generator = self.generator
        if generator.interval_seconds <= 0:
            raise ConfigurationError("GENERATOR_INTERVAL must be positive")
        if generator.max_upload_bytes < 0 or generator.max_download_bytes < 0:
            raise ConfigurationError("Byte bounds cannot be negative")
        if not generator.domains:
            raise ConfigurationError("At least one generator domain is required")
        if not generator.protocols:
            raise ConfigurationError("At least one generator protocol is required")

        # Ensure database directory exists
        db_path = Path(self.database.path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
