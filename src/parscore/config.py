from collections.abc import Mapping
from typing import Any

from attrs import field, fields, frozen

DEFAULT_MAX_DEPTH = 64


def _to_tuple(paths) -> tuple[str, ...]:
    if isinstance(paths, str):
        return (paths,)
    return tuple(str(path) for path in paths)


@frozen
class EngineConfig:
    """Tuning knobs for a `RuleEngine`.

    Params:
        max_depth: Deepest command nesting accepted by the tree builder.
        strict_brackets: Reject unbalanced brackets instead of tokenizing them as-is.
        truncate_decimals: Coerce decimal literals to int (truncating toward zero)
            instead of keeping them as float.
        extension_paths: Python files run by `load_extensions_from_config`.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_brackets: bool = True
    truncate_decimals: bool = False
    extension_paths: tuple[str, ...] = field(default=(), converter=_to_tuple)

    def __attrs_post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a plain mapping such as a host settings section.

        Params:
            settings: Keys matching `EngineConfig` attribute names.

        Returns:
            A new `EngineConfig`.

        Raises:
            TypeError: If the mapping contains unknown keys.
        """
        known = {attribute.name for attribute in fields(cls)}
        unknown = sorted(set(settings) - known)
        if unknown:
            raise TypeError(
                f"Unknown EngineConfig settings: {', '.join(unknown)}. "
                f"Valid settings are: {', '.join(sorted(known))}"
            )
        return cls(**dict(settings))
