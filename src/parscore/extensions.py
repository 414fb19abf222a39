"""Loading of host-provided command extension files.

An extension file is ordinary Python. It may either call
`parscore.register_command` at import time (targeting the default engine) or
define ``register(engine)``, which is called with the engine being extended.
Loading happens during host setup, never while an expression is evaluated.
"""

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

from parscore.config import EngineConfig
from parscore.engine import RuleEngine, get_default_engine

logger = logging.getLogger(__name__)

REGISTER_HOOK = "register"


def load_extensions(
    path: str | Path, engine: RuleEngine | None = None
) -> ModuleType | None:
    """Execute an extension file and let it register its commands.

    Params:
        path: Python file to load.
        engine: Engine passed to the file's ``register`` hook (defaults to the
            process-wide engine).

    Returns:
        The loaded module, or None when the file does not exist.

    Raises:
        ImportError: If the file exists but cannot be loaded as a module.
        TypeError: If the module's ``register`` attribute is not callable.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No extension file at %s", path)
        return None

    engine = engine if engine is not None else get_default_engine()
    module_name = f"parscore_extension_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load extension file {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    hook = getattr(module, REGISTER_HOOK, None)
    if hook is not None:
        if not callable(hook):
            raise TypeError(f"'{REGISTER_HOOK}' in {path} must be callable")
        hook(engine)

    logger.info("Loaded command extensions from %s", path)
    return module


def load_extensions_from_config(
    config: EngineConfig, engine: RuleEngine | None = None
) -> list[ModuleType]:
    """Load every extension file listed in ``config.extension_paths``.

    Missing files are skipped.
    """
    modules = []
    for path in config.extension_paths:
        module = load_extensions(path, engine)
        if module is not None:
            modules.append(module)
    return modules
