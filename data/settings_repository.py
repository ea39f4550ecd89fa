from .db import Database
from .models import Settings
from core.exceptions import DatabaseError
from config.constants import SettingsDefaults

class SettingsRepository:
    """Reads and updates the singleton settings row (id = 1)."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def get_settings(self) -> Settings:
        result = self.db.execute_query(
            "SELECT data_limit_gb, alerts_enabled FROM settings WHERE id = 1"
        )
        if not result:
            # Row is seeded by the schema; recreate it if it was removed out of band
            self._seed_defaults()
            return Settings(SettingsDefaults.DATA_LIMIT_GB, SettingsDefaults.ALERTS_ENABLED)
        return Settings.from_row(result[0])

    def update_settings(self, settings: Settings) -> Settings:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE settings SET data_limit_gb = ?, alerts_enabled = ? WHERE id = 1",
                (settings.data_limit_gb, 1 if settings.alerts_enabled else 0),
            )
            if cursor.rowcount == 0:
                raise DatabaseError("Settings row is missing")
        return self.get_settings()

    def _seed_defaults(self) -> None:
        self.db.execute_query(
            "INSERT OR IGNORE INTO settings (id, data_limit_gb, alerts_enabled) VALUES (1, ?, ?)",
            (SettingsDefaults.DATA_LIMIT_GB, 1 if SettingsDefaults.ALERTS_ENABLED else 0),
        )
