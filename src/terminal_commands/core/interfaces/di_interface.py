from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto
from typing import Any, TypeVar

T = TypeVar("T")


class ServiceLifetime(Enum):
    """Defines the lifetime of a service in the container."""

    TRANSIENT = auto()
    SINGLETON = auto()


class IServiceProvider(ABC):
    @abstractmethod
    def get_service(self, service_type: type[T]) -> T | None:
        pass

    @abstractmethod
    def get_required_service(self, service_type: type[T]) -> T:
        pass

    def has_service(self, service_type: type[Any]) -> bool:
        """Return True when the provider can resolve ``service_type``."""
        return self.get_service(service_type) is not None

    def get_required_service_or_default(
        self, service_type: type[T], default_factory: Callable[[], T]
    ) -> T:
        """Get a service of the given type, using a default factory if not found."""
        service = self.get_service(service_type)
        if service is None:
            return default_factory()
        return service


class IServiceCollection(ABC):
    @abstractmethod
    def add_singleton(
        self,
        service_type: type[T],
        implementation_type: type | None = None,
        implementation_factory: Callable[[IServiceProvider], T] | None = None,
    ) -> IServiceCollection:
        pass

    @abstractmethod
    def add_transient(
        self,
        service_type: type[T],
        implementation_type: type | None = None,
        implementation_factory: Callable[[IServiceProvider], T] | None = None,
    ) -> IServiceCollection:
        pass

    @abstractmethod
    def add_instance(self, service_type: type[T], instance: T) -> IServiceCollection:
        pass

    @abstractmethod
    def with_services(self, *instances: Any, overwrite: bool = False) -> IServiceCollection:
        pass

    @abstractmethod
    def copy(self) -> IServiceCollection:
        pass

    @abstractmethod
    def build_service_provider(self) -> IServiceProvider:
        pass
