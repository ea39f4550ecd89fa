"""
Read-side aggregations over the traffic log for the dashboard.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from data.traffic_repository import TrafficRepository
from data.settings_repository import SettingsRepository
from core.exceptions import ValidationError
from core.logging_config import LoggerMixin, log_performance
from core.traffic_generator import utc_now
from config.constants import AggregationWindows, BYTES_PER_GB
from .units import bytes_to_human, bytes_to_gb

class TrafficService(LoggerMixin):
    """
    Computes the summary, hourly history and recent-records views.
    Nothing is cached; every call queries the current table contents.
    """

    def __init__(self, traffic_repo: TrafficRepository, settings_repo: SettingsRepository,
                 clock: Callable[[], datetime] = utc_now):
        self.traffic_repo = traffic_repo
        self.settings_repo = settings_repo
        self.clock = clock

    @log_performance
    def get_summary(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or self.clock()
        stats = self.traffic_repo.get_totals(now, AggregationWindows.SUMMARY_DAYS)
        top_domains = self.traffic_repo.get_top_domains(AggregationWindows.TOP_DOMAINS_LIMIT)
        protocol_stats = self.traffic_repo.get_protocol_counts()

        return {
            'stats': stats,
            'topDomains': top_domains,
            'protocolStats': protocol_stats,
            'usage': self._usage(stats)
        }

    @log_performance
    def get_history(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        now = now or self.clock()
        return self.traffic_repo.get_hourly_history(now, AggregationWindows.HISTORY_HOURS)

    def get_recent(self, limit: int = AggregationWindows.RECENT_DEFAULT_LIMIT) -> List[Dict[str, Any]]:
        if limit < 1 or limit > AggregationWindows.RECENT_MAX_LIMIT:
            raise ValidationError('limit', f"must be between 1 and {AggregationWindows.RECENT_MAX_LIMIT}")
        return [record.to_dict() for record in self.traffic_repo.get_recent_records(limit)]

    def _usage(self, stats: Dict[str, int]) -> Dict[str, Any]:
        settings = self.settings_repo.get_settings()
        total_bytes = stats['total_upload'] + stats['total_download']
        total_gb = bytes_to_gb(total_bytes)
        limit_bytes = int(settings.data_limit_gb * BYTES_PER_GB)

        return {
            'total_bytes': total_bytes,
            'total_gb': round(total_gb, 4),
            'total_human': bytes_to_human(total_bytes),
            'data_limit_gb': settings.data_limit_gb,
            'data_limit_human': bytes_to_human(limit_bytes),
            'alerts_enabled': settings.alerts_enabled,
            'over_limit': total_gb > settings.data_limit_gb
        }
