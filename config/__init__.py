# Configuration module exports
from .app_config import (
    AppConfig,
    DatabaseConfig,
    SecurityConfig,
    ServerConfig,
    GeneratorConfig,
    LoggingConfig,
)
from .constants import GeneratorDefaults, SettingsDefaults, AggregationWindows

__all__ = [
    'AppConfig',
    'DatabaseConfig',
    'SecurityConfig',
    'ServerConfig',
    'GeneratorConfig',
    'LoggingConfig',
    'GeneratorDefaults',
    'SettingsDefaults',
    'AggregationWindows'
]
