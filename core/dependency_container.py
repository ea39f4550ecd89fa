from typing import Dict, Any, Optional, TypeVar, Callable
from config.app_config import AppConfig
from data.db import Database
from data.user_repository import UserRepository
from data.traffic_repository import TrafficRepository
from data.settings_repository import SettingsRepository
from service.auth_service import AuthService
from service.traffic_service import TrafficService
from service.settings_service import SettingsService
from core.jwt_service import JWTService
from core.subscriber_registry import SubscriberRegistry
from core.traffic_generator import TrafficGenerator
from core.traffic_simulator import TrafficSimulator
T = TypeVar('T')

class DependencyContainer:
    """
    Process-lifetime context owned by one Flask app.
    Holds the database, repositories, services, the subscriber registry and
    the traffic simulator task; created lazily on first ``get``.
    """

    def __init__(self, config: AppConfig):
        self._instances: Dict[str, Any] = {'config': config}
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    def register_singleton(self, name: str, factory: Callable[[], T]) -> None:
        self._factories[name] = factory

    def register_instance(self, name: str, instance: Any) -> None:
        self._instances[name] = instance

    def get(self, name: str) -> Any:
        if name in self._instances:
            return self._instances[name]
        if name in self._factories:
            instance = self._factories[name]()
            self._instances[name] = instance
            return instance
        raise KeyError(f"Dependency '{name}' not registered")

    def register_core_dependencies(self) -> None:
        self.register_singleton('database', self._create_database)
        self.register_singleton('user_repository', self._create_user_repository)
        self.register_singleton('traffic_repository', self._create_traffic_repository)
        self.register_singleton('settings_repository', self._create_settings_repository)
        self.register_singleton('jwt_service', self._create_jwt_service)
        self.register_singleton('subscriber_registry', SubscriberRegistry)
        self.register_singleton('traffic_generator', self._create_traffic_generator)
        self.register_singleton('traffic_simulator', self._create_traffic_simulator)

    def register_service_dependencies(self) -> None:
        self.register_singleton('auth_service', self._create_auth_service)
        self.register_singleton('traffic_service', self._create_traffic_service)
        self.register_singleton('settings_service', self._create_settings_service)

    def _create_database(self) -> Database:
        database = Database(self._config.database.path)
        database.initialize_schema()
        return database

    def _create_user_repository(self) -> UserRepository:
        return UserRepository(self.get('database'), self._config.security.bcrypt_rounds)

    def _create_traffic_repository(self) -> TrafficRepository:
        return TrafficRepository(self.get('database'))

    def _create_settings_repository(self) -> SettingsRepository:
        return SettingsRepository(self.get('database'))

    def _create_jwt_service(self) -> JWTService:
        security = self._config.security
        return JWTService(security.jwt_secret, security.token_expiry_hours)

    def _create_traffic_generator(self) -> TrafficGenerator:
        return TrafficGenerator(self._config.generator)

    def _create_traffic_simulator(self) -> TrafficSimulator:
        return TrafficSimulator(
            self.get('traffic_generator'),
            self.get('traffic_repository'),
            self.get('subscriber_registry'),
            self._config.generator.interval_seconds
        )

    def _create_auth_service(self) -> AuthService:
        return AuthService(self.get('user_repository'), self.get('jwt_service'))

    def _create_traffic_service(self) -> TrafficService:
        return TrafficService(self.get('traffic_repository'), self.get('settings_repository'))

    def _create_settings_service(self) -> SettingsService:
        return SettingsService(self.get('settings_repository'))

    def cleanup(self) -> None:
        simulator: Optional[TrafficSimulator] = self._instances.get('traffic_simulator')
        if simulator and simulator.is_running:
            simulator.stop()
        database: Optional[Database] = self._instances.get('database')
        if database:
            database.close_pool()
        self._instances = {'config': self._config}

def build_container(config: AppConfig) -> DependencyContainer:
    container = DependencyContainer(config)
    container.register_core_dependencies()
    container.register_service_dependencies()
    return container
