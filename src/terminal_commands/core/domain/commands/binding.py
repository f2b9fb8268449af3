"""
Parameter binding for command overloads and interaction handlers.

Each parameter of a handler is classified once, when the handler is wrapped:

- ``REMAINING``: annotated ``Annotated[str, RemainingText]``; receives the
  rest of the line
- ``ARGUMENT``: annotated with a type the converter registry can parse (an
  unannotated parameter counts as ``str``); receives the next token
- ``SERVICE``: anything else; resolved by type from the service provider

Binding walks the parameters in order against the shared argument stream.
"""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from terminal_commands.core.common.exceptions import (
    ArgumentStreamExhaustedError,
    CommandRegistrationError,
)
from terminal_commands.core.domain.argument_stream import ArgumentStream
from terminal_commands.core.domain.commands.attributes import RemainingText
from terminal_commands.core.domain.commands.converters import (
    ArgumentConverterRegistry,
    default_converters,
)
from terminal_commands.core.interfaces.di_interface import IServiceProvider

logger = logging.getLogger(__name__)


class ParameterKind(Enum):
    SERVICE = "service"
    ARGUMENT = "argument"
    REMAINING = "remaining"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    annotation: Any
    kind: ParameterKind
    keyword_only: bool = False
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


@dataclass
class BoundArguments:
    args: list[Any]
    kwargs: dict[str, Any]


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _resolve_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func, include_extras=True)
    except Exception as e:  # unresolved forward references
        logger.debug(
            "Could not resolve type hints for %s: %s",
            getattr(func, "__qualname__", func),
            e,
        )
        return {}


def inspect_parameters(
    func: Callable[..., Any],
    converters: ArgumentConverterRegistry | None = None,
) -> list[ParameterSpec]:
    """Classify the parameters of ``func`` for binding.

    Raises:
        CommandRegistrationError: If ``func`` takes ``*args`` or ``**kwargs``
    """
    registry = converters or default_converters
    hints = _resolve_hints(func)
    signature = inspect.signature(func)

    specs: list[ParameterSpec] = []
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            raise CommandRegistrationError(
                f"Variadic parameter '{parameter.name}' is not supported",
                command_name=getattr(func, "__name__", None),
            )

        annotation = hints.get(parameter.name, parameter.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = str

        kind = ParameterKind.SERVICE
        if get_origin(annotation) is Annotated:
            base, *extras = get_args(annotation)
            if any(extra is RemainingText or isinstance(extra, RemainingText) for extra in extras):
                kind = ParameterKind.REMAINING
            annotation = base

        annotation = _unwrap_optional(annotation)
        if kind is ParameterKind.SERVICE and registry.can_convert(annotation):
            kind = ParameterKind.ARGUMENT

        specs.append(
            ParameterSpec(
                name=parameter.name,
                annotation=annotation,
                kind=kind,
                keyword_only=parameter.kind is inspect.Parameter.KEYWORD_ONLY,
                default=parameter.default,
            )
        )
    return specs


def count_stream_parameters(specs: Sequence[ParameterSpec]) -> int:
    return sum(1 for spec in specs if spec.kind is not ParameterKind.SERVICE)


def _bind_one(
    spec: ParameterSpec,
    stream: ArgumentStream,
    services: IServiceProvider,
    converters: ArgumentConverterRegistry,
) -> tuple[bool, Any]:
    if spec.kind is ParameterKind.SERVICE:
        service = services.get_service(spec.annotation)
        if service is not None:
            return True, service
        return spec.has_default, spec.default if spec.has_default else None

    if spec.kind is ParameterKind.REMAINING:
        ok, text = stream.try_read_remaining()
        if ok:
            return True, text
        return spec.has_default, spec.default if spec.has_default else None

    if spec.has_default:
        # Optional arguments only consume a token that converts cleanly
        token = stream.peek()
        if token is None:
            return True, spec.default
        ok, value = converters.try_convert(token, spec.annotation)
        if not ok:
            return True, spec.default
        stream.read_next()
        return True, value

    return stream.try_read_next(spec.annotation, converters)


def bind_parameters(
    specs: Sequence[ParameterSpec],
    stream: ArgumentStream,
    services: IServiceProvider,
    converters: ArgumentConverterRegistry | None = None,
) -> BoundArguments | None:
    """Bind ``specs`` against the stream and services.

    Tokens consumed before a failing parameter remain consumed.

    Returns:
        The bound call arguments, or None when the handler does not match
    """
    registry = converters or default_converters
    bound = BoundArguments(args=[], kwargs={})
    try:
        for spec in specs:
            ok, value = _bind_one(spec, stream, services, registry)
            if not ok:
                return None
            if spec.keyword_only:
                bound.kwargs[spec.name] = value
            else:
                bound.args.append(value)
    except ArgumentStreamExhaustedError:
        return None
    return bound
