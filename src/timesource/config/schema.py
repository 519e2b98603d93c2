# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration schema for building clocks from settings.

A composition root reads these from YAML or JSON and hands them to
:class:`~timesource.config.factory.ClockFactory`.
"""

from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator


class ClockConfigSchema(BaseModel):
    """Single clock configuration.

    Attributes:
        type: Registered clock type ("system", "fixed", or a custom type)
        value: Fixed instant as text, parsed by ``FixedClock.at``
            (required for "fixed")
        timezone: IANA zone name (e.g. "Europe/Helsinki"); ``None`` keeps
            each clock's default
    """

    type: str = "system"
    value: str | None = None
    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: '{v}'") from e
        return v

    def zone(self) -> tzinfo | None:
        """Return the configured zone, or ``None`` when unset."""
        return ZoneInfo(self.timezone) if self.timezone else None
