"""
Synthesizes fake traffic records. No real packets are captured or parsed.
"""

import random
from datetime import datetime, timezone
from typing import Callable, Optional
from config.app_config import GeneratorConfig
from config.constants import GeneratorDefaults, TIMESTAMP_FORMAT
from data.models import TrafficRecord

def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching stored timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

class TrafficGenerator:
    """
    Builds one random TrafficRecord per call.

    Domain and protocol are drawn uniformly from the configured sets; upload
    and download byte counts are uniform integers in ``[0, max)``; addresses
    are the configured prefixes followed by a random host octet.
    """

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None,
                 clock: Callable[[], datetime] = utc_now):
        self.config = config
        self.rng = rng or random.Random()
        self.clock = clock

    def generate(self) -> TrafficRecord:
        cfg = self.config
        return TrafficRecord(
            timestamp=self.clock().strftime(TIMESTAMP_FORMAT),
            source_ip=self._address(cfg.source_prefix),
            destination_ip=self._address(cfg.destination_prefix),
            domain=self.rng.choice(cfg.domains),
            protocol=self.rng.choice(cfg.protocols),
            upload_bytes=self._byte_count(cfg.max_upload_bytes),
            download_bytes=self._byte_count(cfg.max_download_bytes),
        )

    def _byte_count(self, upper: int) -> int:
        if upper <= 0:
            return 0
        return self.rng.randrange(upper)

    def _address(self, prefix: str) -> str:
        return f"{prefix}{self.rng.randint(0, GeneratorDefaults.MAX_HOST_OCTET)}"
