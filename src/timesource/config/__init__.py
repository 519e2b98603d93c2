# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Config submodule for building clocks from settings.

Exports:
    ClockConfigSchema: Validated clock configuration
    ClockFactory: Creates clock instances from configuration
    ClockFactoryError: Raised when a clock cannot be created
"""

from .factory import ClockFactory, ClockFactoryError
from .schema import ClockConfigSchema

__all__ = [
    "ClockConfigSchema",
    "ClockFactory",
    "ClockFactoryError",
]
