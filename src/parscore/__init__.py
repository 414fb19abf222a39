"""
ParsCore - A bracket-syntax rule expression engine

ParsCore parses expressions such as ``AND[equals[1,1],NOT[false]]`` into a
syntax tree and evaluates them against a registry of pluggable commands.
"""

import logging
from importlib.metadata import version

from parscore.commands import CommandRegistry, ParamSpec, ParamType, ResultKind
from parscore.config import EngineConfig
from parscore.engine import (
    RuleEngine,
    command,
    evaluate,
    get_default_engine,
    parse,
    register_command,
    set_default_engine,
)
from parscore.execution import EvaluationError, EvaluationResult
from parscore.extensions import load_extensions, load_extensions_from_config

__version__ = version("parscore")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "RuleEngine",
    "CommandRegistry",
    "EngineConfig",
    "EvaluationError",
    "EvaluationResult",
    "ParamSpec",
    "ParamType",
    "ResultKind",
    "command",
    "evaluate",
    "get_default_engine",
    "load_extensions",
    "load_extensions_from_config",
    "parse",
    "register_command",
    "set_default_engine",
]
