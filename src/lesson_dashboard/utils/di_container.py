"""
Dependency Injection Container.

This module provides a simple DI container for wiring the configuration,
logger, lesson service and lesson store together.
"""

import logging
from typing import Any, Callable, Dict, Type


logger = logging.getLogger(__name__)


class DIContainer:
    """
    Simple dependency injection container.

    Supports:
    - Service registration with factory functions
    - Singleton pattern for shared instances
    - Clear error messages for missing services

    Examples:
        >>> container = DIContainer()
        >>> container.register(Config, lambda: Config(), singleton=True)
        >>> config = container.resolve(Config)
    """

    def __init__(self):
        """Initialize empty container."""
        self._services: Dict[Type, Callable] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_flags: Dict[Type, bool] = {}

        logger.debug("DI Container initialized")

    def register(
        self,
        interface: Type,
        implementation: Callable,
        singleton: bool = False
    ):
        """
        Register a service in the container.

        Args:
            interface: Service interface or type
            implementation: Factory function that creates the service
            singleton: Whether to create a single shared instance
        """
        self._services[interface] = implementation
        self._singleton_flags[interface] = singleton
        self._singletons.pop(interface, None)

        logger.debug(
            f"Registered service: {interface.__name__} "
            f"(singleton={singleton})"
        )

    def resolve(self, interface: Type) -> Any:
        """
        Resolve a service from the container.

        Raises:
            ValueError: If service is not registered
        """
        if interface not in self._services:
            raise ValueError(
                f"Service not registered: {interface.__name__}. "
                f"Available services: {', '.join(s.__name__ for s in self._services.keys())}"
            )

        if self._singleton_flags.get(interface, False):
            if interface not in self._singletons:
                logger.debug(f"Creating singleton instance: {interface.__name__}")
                self._singletons[interface] = self._services[interface]()
            return self._singletons[interface]

        logger.debug(f"Creating transient instance: {interface.__name__}")
        return self._services[interface]()

    def is_registered(self, interface: Type) -> bool:
        """Check if a service is registered."""
        return interface in self._services

    def clear(self):
        """Clear all registered services."""
        self._services.clear()
        self._singletons.clear()
        self._singleton_flags.clear()
        logger.debug("DI Container cleared")


def configure_default_services(container: DIContainer, use_mock: bool = False):
    """
    Register the dashboard's services.

    The lesson service is the mock service when ``use_mock`` is set, when
    USE_MOCK_API is true, or when no LESSONS_API_BASE_URL is configured;
    otherwise the HTTP service.

    Args:
        container: DI container to configure
        use_mock: Force the mock lesson service

    Examples:
        >>> container = DIContainer()
        >>> configure_default_services(container)
        >>> store = container.resolve(LessonStore)
    """
    from ..auth import AuthSession
    from ..services.http_service import HttpLessonService
    from ..services.interfaces import LessonService
    from ..services.mock_service import DEFAULT_TUTOR, MockLessonService
    from ..store.lesson_store import LessonStore
    from .config import Config, config
    from .logger import setup_logger

    container.register(Config, lambda: config, singleton=True)

    container.register(
        logging.Logger,
        lambda: setup_logger(level=container.resolve(Config).log_level),
        singleton=True
    )

    container.register(
        AuthSession,
        lambda: AuthSession(default_name=container.resolve(Config).tutor_name),
        singleton=True
    )

    def create_service() -> LessonService:
        cfg = container.resolve(Config)
        if use_mock or cfg.use_mock_api:
            return MockLessonService(
                timeout=cfg.api_timeout,
                tutor_name=cfg.tutor_name or DEFAULT_TUTOR
            )
        return HttpLessonService(
            cfg.api_base_url,
            timeout=cfg.api_timeout,
            token=cfg.api_token
        )

    container.register(LessonService, create_service, singleton=True)

    container.register(
        LessonStore,
        lambda: LessonStore(
            container.resolve(LessonService),
            container.resolve(AuthSession)
        ),
        singleton=True
    )

    logger.info("Default services configured")
