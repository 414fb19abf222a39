"""
Core type definitions for ParsCore.

This module contains fundamental type aliases used throughout ParsCore for
type safety and consistency.
"""

from collections.abc import Callable
from typing import Any

LiteralValue = bool | int | float | str

Context = Any

CommandHandler = Callable[[list[Any], Context], Any]

SchemaEntry = dict[str, Any]
