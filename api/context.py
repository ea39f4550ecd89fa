"""
Access to the per-app dependency container from request handlers.
"""

from typing import Any
from flask import current_app
from core.dependency_container import DependencyContainer

EXTENSION_KEY = 'traffic_dashboard'

def get_container() -> DependencyContainer:
    return current_app.extensions[EXTENSION_KEY]

def get_service(name: str) -> Any:
    return get_container().get(name)
