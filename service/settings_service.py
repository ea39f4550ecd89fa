from data.models import Settings
from data.settings_repository import SettingsRepository
from core.logging_config import LoggerMixin
from .requests import SettingsUpdate

class SettingsService(LoggerMixin):
    """Reads and writes the dashboard's singleton settings."""

    def __init__(self, settings_repo: SettingsRepository):
        self.settings_repo = settings_repo

    def get_settings(self) -> Settings:
        return self.settings_repo.get_settings()

    def update_settings(self, update: SettingsUpdate, updated_by: str) -> Settings:
        settings = self.settings_repo.update_settings(
            Settings(data_limit_gb=update.data_limit_gb, alerts_enabled=update.alerts_enabled)
        )
        self.logger.info(
            "Settings updated",
            updated_by=updated_by,
            data_limit_gb=settings.data_limit_gb,
            alerts_enabled=settings.alerts_enabled
        )
        return settings
