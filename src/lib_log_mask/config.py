"""Environment configuration helpers, including optional ``.env`` loading.

Purpose
-------
Centralise how the package reads switches from the process environment and
how a nearby ``.env`` file is merged in via python-dotenv.

Contents
--------
* :data:`DOTENV_ENV_VAR` – environment toggle enabling ``.env`` loading.
* :func:`parse_bool` – strict boolean parsing for environment values.
* :func:`should_use_dotenv` – precedence rule (explicit flag beats env).
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.

System Role
-----------
Outer configuration layer used by the CLI and by
:func:`lib_log_mask.runtime.build_runtime`. Values already present in the
environment always win over ``.env`` entries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_MASK_USE_DOTENV"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

_DOTENV_LOCK = Lock()
_DOTENV_ATTEMPTED = False
_DOTENV_PATH: Path | None = None


def parse_bool(name: str, raw: str) -> bool:
    """Interpret ``raw`` as a boolean or raise :class:`ValueError`.

    Examples
    --------
    >>> parse_bool("LOG_MASK_ENABLED", " Yes ")
    True
    >>> parse_bool("LOG_MASK_ENABLED", "off")
    False
    """
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise :data:`DOTENV_ENV_VAR` decides and an
    unset or unrecognised value means "no".

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="true")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the working directory).

    Values are merged into :data:`os.environ`; existing environment variables
    are never overridden. The search runs once per process; later calls return
    the path found by the first call.
    """
    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_PATH
        _DOTENV_ATTEMPTED = True
        found = find_dotenv(usecwd=True)
        if not found:
            logger.debug("No .env file found above the working directory")
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        logger.debug("Loaded environment defaults from %s", path)
        _DOTENV_PATH = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    """Forget a previous :func:`enable_dotenv` call (tests only)."""
    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_ATTEMPTED = False
        _DOTENV_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "parse_bool", "should_use_dotenv"]
