import threading
from typing import Any, Optional
from .exceptions import DatabaseError
from .logging_config import LoggerMixin
from .subscriber_registry import SubscriberRegistry
from .traffic_generator import TrafficGenerator
from .types import TRAFFIC_UPDATE
from data.models import TrafficRecord
from data.traffic_repository import TrafficRepository

class TrafficSimulator(LoggerMixin):
    """
    Periodic generate -> insert -> fan-out loop.

    One instance is owned by the application's dependency container. The loop
    runs as a single background task started through Flask-SocketIO, so ticks
    never overlap each other.
    """

    def __init__(self, generator: TrafficGenerator, traffic_repo: TrafficRepository,
                 registry: SubscriberRegistry, interval_seconds: float):
        self.generator = generator
        self.traffic_repo = traffic_repo
        self.registry = registry
        self.interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._task: Optional[Any] = None
        self.ticks = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._stop_event.is_set()

    def tick(self) -> TrafficRecord:
        """Generate and persist one record, then push it to every subscriber."""
        record = self.traffic_repo.insert_record(self.generator.generate())
        delivered = self.registry.broadcast({'type': TRAFFIC_UPDATE, 'data': record.to_dict()})
        self.ticks += 1
        self.logger.debug(
            "Traffic record generated",
            record_id=record.id,
            domain=record.domain,
            protocol=record.protocol,
            delivered=delivered
        )
        return record

    def start(self, socketio) -> None:
        """Start the background loop on the given Flask-SocketIO server."""
        if self.is_running:
            self.logger.warning("Traffic simulator is already running")
            return
        # A loop from an earlier start may still be asleep; it keeps its own event
        self._stop_event = threading.Event()
        self._task = socketio.start_background_task(self._run, socketio.sleep, self._stop_event)
        self.logger.info("Traffic simulator started", interval_seconds=self.interval_seconds)

    def stop(self) -> None:
        self._stop_event.set()
        self._task = None
        self.logger.info("Traffic simulator stopped", ticks=self.ticks)

    def _run(self, sleep, stop_event: Optional[threading.Event] = None) -> None:
        if stop_event is None:
            stop_event = self._stop_event
        while not stop_event.is_set():
            sleep(self.interval_seconds)
            if stop_event.is_set():
                break
            try:
                self.tick()
            except DatabaseError as e:
                self.logger.error("Failed to store generated traffic record", error=str(e))
