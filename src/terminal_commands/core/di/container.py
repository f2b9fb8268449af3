from __future__ import annotations

import inspect
import logging
import os
from collections.abc import Callable
from typing import Any, TypeVar

from terminal_commands.core.common.exceptions import ServiceResolutionError
from terminal_commands.core.interfaces.di_interface import (
    IServiceCollection,
    IServiceProvider,
    ServiceLifetime,
)

T = TypeVar("T")


class ServiceDescriptor:
    """Describes a service registration in the container."""

    def __init__(
        self,
        service_type: type,
        lifetime: ServiceLifetime,
        implementation_type: type | None = None,
        implementation_factory: Callable[[IServiceProvider], Any] | None = None,
        instance: Any | None = None,
    ):
        """Initialize a service descriptor.

        Args:
            service_type: The type of service being registered
            lifetime: The lifetime of the service
            implementation_type: The implementation type (if different from service_type)
            implementation_factory: Factory function to create the service
            instance: An existing instance (for singleton services)
        """
        self.service_type = service_type
        self.lifetime = lifetime
        self.implementation_type = implementation_type or service_type
        self.implementation_factory = implementation_factory
        self.instance = instance

        if not implementation_type and not implementation_factory and instance is None:
            raise ValueError(
                "Either implementation_type, implementation_factory, or instance must be provided"
            )

    def satisfies(self, service_type: type) -> bool:
        """Return True when this registration can stand in for ``service_type``."""
        if not isinstance(service_type, type):
            return False
        if self.instance is not None:
            return isinstance(self.instance, service_type)
        return isinstance(self.implementation_type, type) and issubclass(
            self.implementation_type, service_type
        )


class ServiceProvider(IServiceProvider):
    """Resolves services from a snapshot of service descriptors.

    Resolution looks for an exact registration first, then falls back to the
    first registration (in registration order) whose instance or
    implementation type is compatible with the requested type.
    """

    def __init__(self, descriptors: dict[type, ServiceDescriptor]) -> None:
        self._descriptors = descriptors
        self._singleton_instances: dict[type, Any] = {}
        self._diagnostics = os.getenv("DI_STRICT_DIAGNOSTICS", "false").lower() in (
            "true",
            "1",
            "yes",
        )
        self._diag_logger = logging.getLogger("terminal_commands.di")

    def get_service(self, service_type: type[T]) -> T | None:
        """Get a service of the given type if registered."""
        descriptor = self._find_descriptor(service_type)
        if descriptor is None:
            if self._diagnostics:
                type_name = getattr(service_type, "__name__", str(service_type))
                self._diag_logger.warning(
                    "DI: no descriptor for %s; registered=%d",
                    type_name,
                    len(self._descriptors),
                )
            return None

        if descriptor.instance is not None:
            return descriptor.instance  # type: ignore[no-any-return]

        if descriptor.lifetime == ServiceLifetime.SINGLETON:
            key = descriptor.service_type
            if key not in self._singleton_instances:
                self._singleton_instances[key] = self._create_instance(descriptor)
            return self._singleton_instances[key]  # type: ignore[no-any-return]

        return self._create_instance(descriptor)  # type: ignore[no-any-return]

    def get_required_service(self, service_type: type[T]) -> T:
        """Get a service of the given type, throwing if not found."""
        service = self.get_service(service_type)
        if service is None:
            type_name = getattr(service_type, "__name__", str(service_type))
            raise ServiceResolutionError(
                f"No service registered for {type_name}", service_name=type_name
            )
        return service

    def _find_descriptor(self, service_type: type) -> ServiceDescriptor | None:
        try:
            descriptor = self._descriptors.get(service_type)
        except TypeError:
            # Unhashable annotations never match a registration
            return None
        if descriptor is not None:
            return descriptor
        for candidate in self._descriptors.values():
            if candidate.satisfies(service_type):
                return candidate
        return None

    def _create_instance(self, descriptor: ServiceDescriptor) -> Any:
        """Create an instance of a service."""
        if descriptor.implementation_factory:
            return descriptor.implementation_factory(self)

        impl_type = descriptor.implementation_type
        if impl_type is None:
            raise RuntimeError("Implementation type is None and no factory provided")

        try:
            signature = inspect.signature(impl_type)
            has_provider_param = "service_provider" in signature.parameters
        except (ValueError, TypeError):
            has_provider_param = False

        if has_provider_param:
            return impl_type(service_provider=self)
        return impl_type()


class ServiceCollection(IServiceCollection):
    """A mutable set of service registrations.

    The same collection type is used to compose the application and as the
    per-dispatch service context handed to command binders.
    """

    def __init__(self) -> None:
        self._descriptors: dict[type, ServiceDescriptor] = {}

    def __contains__(self, service_type: object) -> bool:
        return service_type in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def add_singleton(
        self,
        service_type: type[Any],
        implementation_type: type | None = None,
        implementation_factory: Callable[[IServiceProvider], Any] | None = None,
    ) -> IServiceCollection:
        """Register a singleton service."""
        if implementation_type is None and implementation_factory is None:
            implementation_type = service_type

        self._descriptors[service_type] = ServiceDescriptor(
            service_type=service_type,
            lifetime=ServiceLifetime.SINGLETON,
            implementation_type=implementation_type,
            implementation_factory=implementation_factory,
        )
        return self

    def add_transient(
        self,
        service_type: type[Any],
        implementation_type: type | None = None,
        implementation_factory: Callable[[IServiceProvider], Any] | None = None,
    ) -> IServiceCollection:
        """Register a transient service."""
        if implementation_type is None and implementation_factory is None:
            implementation_type = service_type

        self._descriptors[service_type] = ServiceDescriptor(
            service_type=service_type,
            lifetime=ServiceLifetime.TRANSIENT,
            implementation_type=implementation_type,
            implementation_factory=implementation_factory,
        )
        return self

    def add_instance(
        self, service_type: type[Any], instance: Any
    ) -> IServiceCollection:
        """Register an existing instance as a singleton."""
        self._descriptors[service_type] = ServiceDescriptor(
            service_type=service_type,
            lifetime=ServiceLifetime.SINGLETON,
            instance=instance,
        )
        return self

    def with_services(self, *instances: Any, overwrite: bool = False) -> IServiceCollection:
        """Register instances under their concrete types.

        ``None`` entries are ignored. Unless ``overwrite`` is set, an existing
        registration for the same type wins over the new instance.
        """
        for instance in instances:
            if instance is None:
                continue
            service_type = type(instance)
            if service_type in self._descriptors and not overwrite:
                continue
            self.add_instance(service_type, instance)
        return self

    def copy(self) -> ServiceCollection:
        """Return a new collection holding the same registrations."""
        clone = ServiceCollection()
        clone._descriptors = self._descriptors.copy()
        return clone

    def build_service_provider(self) -> IServiceProvider:
        """Build a service provider with the registered services."""
        return ServiceProvider(self._descriptors.copy())
