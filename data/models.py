from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
from core.types import Username, Email, IPAddress, Domain, DatabaseRow

@dataclass(frozen=True)
class TrafficRecord:
    timestamp: str
    source_ip: IPAddress
    destination_ip: IPAddress
    domain: Domain
    protocol: str
    upload_bytes: int
    download_bytes: int
    id: Optional[int] = None

    @property
    def total_bytes(self) -> int:
        return self.upload_bytes + self.download_bytes

    @classmethod
    def from_row(cls, row: DatabaseRow) -> 'TrafficRecord':
        return cls(
            id=row['id'],
            timestamp=row['timestamp'],
            source_ip=row['source_ip'],
            destination_ip=row['destination_ip'],
            domain=row['domain'],
            protocol=row['protocol'],
            upload_bytes=row['upload_bytes'],
            download_bytes=row['download_bytes'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'timestamp': self.timestamp,
            'source_ip': self.source_ip,
            'destination_ip': self.destination_ip,
            'domain': self.domain,
            'protocol': self.protocol,
            'upload_bytes': self.upload_bytes,
            'download_bytes': self.download_bytes,
        }

@dataclass
class Settings:
    data_limit_gb: float
    alerts_enabled: bool

    @classmethod
    def from_row(cls, row: DatabaseRow) -> 'Settings':
        return cls(
            data_limit_gb=float(row['data_limit_gb']),
            alerts_enabled=bool(row['alerts_enabled']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class User:
    id: int
    username: Username
    email: Email
    password_hash: str

    @classmethod
    def from_row(cls, row: DatabaseRow) -> 'User':
        return cls(
            id=row['id'],
            username=row['username'],
            email=row['email'],
            password_hash=row['password_hash'],
        )

    def public_dict(self) -> Dict[str, Any]:
        """User fields that are safe to return to clients."""
        return {'username': self.username, 'email': self.email}
