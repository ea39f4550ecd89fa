# Data module exports
from .models import TrafficRecord, Settings, User
from .db import Database
from .user_repository import UserRepository
from .traffic_repository import TrafficRepository
from .settings_repository import SettingsRepository

__all__ = [
    'TrafficRecord',
    'Settings',
    'User',
    'Database',
    'UserRepository',
    'TrafficRepository',
    'SettingsRepository'
]
