"""
Validated request bodies for the JSON API.
Each struct is built from the decoded JSON body with ``from_json`` and raises
ValidationError when a required field is missing or malformed.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional
from core.exceptions import ValidationError

USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_.-]{3,50}$')
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 100

def _require_body(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("body", "JSON object expected")
    return data

def _require_str(data: Dict[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required")
    return value

@dataclass(frozen=True)
class SignupRequest:
    username: str
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'SignupRequest':
        data = _require_body(data)
        username = _require_str(data, 'username').strip()
        email = _require_str(data, 'email').strip().lower()
        password = _require_str(data, 'password')

        if not USERNAME_PATTERN.match(username):
            raise ValidationError('username', "must be 3-50 characters of letters, digits, '_', '.' or '-'")
        if not EMAIL_PATTERN.match(email):
            raise ValidationError('email', "is not a valid address")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError('password', f"must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password) > MAX_PASSWORD_LENGTH:
            raise ValidationError('password', f"must be at most {MAX_PASSWORD_LENGTH} characters")

        return cls(username=username, email=email, password=password)

@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'LoginRequest':
        data = _require_body(data)
        return cls(
            email=_require_str(data, 'email').strip().lower(),
            password=_require_str(data, 'password'),
        )

@dataclass(frozen=True)
class SettingsUpdate:
    data_limit_gb: float
    alerts_enabled: bool

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'SettingsUpdate':
        data = _require_body(data)

        if 'data_limit_gb' not in data:
            raise ValidationError('data_limit_gb', "is required")
        raw_limit = data['data_limit_gb']
        # bool is an int subclass; reject it explicitly
        if isinstance(raw_limit, bool):
            raise ValidationError('data_limit_gb', "must be a number")
        try:
            data_limit_gb = float(raw_limit)
        except (TypeError, ValueError):
            raise ValidationError('data_limit_gb', "must be a number")
        if not math.isfinite(data_limit_gb) or data_limit_gb < 0:
            raise ValidationError('data_limit_gb', "must be a finite non-negative number")

        if 'alerts_enabled' not in data:
            raise ValidationError('alerts_enabled', "is required")
        alerts_enabled = data['alerts_enabled']
        if isinstance(alerts_enabled, int) and not isinstance(alerts_enabled, bool) and alerts_enabled in (0, 1):
            alerts_enabled = bool(alerts_enabled)
        if not isinstance(alerts_enabled, bool):
            raise ValidationError('alerts_enabled', "must be a boolean")

        return cls(data_limit_gb=data_limit_gb, alerts_enabled=alerts_enabled)
