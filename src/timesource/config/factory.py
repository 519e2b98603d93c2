# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Clock factory for creating clock instances from configuration.

Uses the Registry pattern to map type strings to clock builders,
allowing extensibility without modifying factory code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from timesource.clock import Clock, FixedClock, SystemClock
from timesource.exceptions import ClockConfigError, TimesourceError

from .schema import ClockConfigSchema

logger = logging.getLogger(__name__)

ClockBuilder = Callable[[ClockConfigSchema], Clock]


class ClockFactoryError(TimesourceError):
    """Raised when clock creation fails."""

    pass


def _build_system(config: ClockConfigSchema) -> Clock:
    tz = config.zone()
    return SystemClock(tz) if tz is not None else SystemClock()


def _build_fixed(config: ClockConfigSchema) -> Clock:
    if not config.value:
        raise ClockConfigError(config.type, "'value' is required")
    return FixedClock.at(config.value, tz=config.zone())


class ClockFactory:
    """Creates clock instances from configuration.

    Clock types are registered at class level and can be extended via the
    `register` class method.

    Example:
        factory = ClockFactory()
        clock = factory.create({"type": "fixed", "value": "2016-10-18"})
        calculator = DaysUntilCalculator(clock)
    """

    # Class-level registry mapping type strings to clock builders
    _registry: ClassVar[dict[str, ClockBuilder]] = {
        "system": _build_system,
        "fixed": _build_fixed,
    }

    @classmethod
    def register(cls, type_name: str, builder: ClockBuilder) -> None:
        """Register a custom clock type.

        Args:
            type_name: Type string to use in configuration
            builder: Callable taking a ``ClockConfigSchema`` and returning a clock

        Raises:
            ValueError: If type_name is empty or builder is not callable

        Example:
            ClockFactory.register("frozen_epoch", lambda cfg: FixedClock(EPOCH))
        """
        if not type_name:
            raise ValueError("Clock type name must not be empty")
        if not callable(builder):
            raise ValueError(f"Builder for clock type '{type_name}' is not callable")
        cls._registry[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered clock type names."""
        return list(cls._registry.keys())

    def create(self, config: ClockConfigSchema | Mapping[str, Any]) -> Clock:
        """Create a clock from configuration.

        Args:
            config: Validated schema, or a raw mapping to validate

        Returns:
            Created clock instance

        Raises:
            ClockFactoryError: If validation fails, the type is unknown,
                or the builder fails
        """
        if not isinstance(config, ClockConfigSchema):
            try:
                config = ClockConfigSchema.model_validate(config)
            except ValidationError as e:
                raise ClockFactoryError(f"Invalid clock configuration: {e}") from e

        builder = self._registry.get(config.type)
        if not builder:
            available = ", ".join(sorted(self.registered_types()))
            raise ClockFactoryError(
                f"Unknown clock type: '{config.type}'. Available types: {available}"
            )

        try:
            clock = builder(config)
        except Exception as e:
            raise ClockFactoryError(f"Failed to create clock of type '{config.type}': {e}") from e

        if not isinstance(clock, Clock):
            raise ClockFactoryError(
                f"Builder for clock type '{config.type}' returned "
                f"{type(clock).__name__}, which has no current_time()"
            )

        logger.debug("Created %r from %s config", clock, config.type)
        return clock
