"""Map property records onto environment variables.

``aeron.dir = /tmp/aeron`` becomes ``AERON_DIR=/tmp/aeron``: dots turn into
underscores and ASCII letters are upper-cased. An empty value unsets the
variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import MutableMapping, Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def env_name(name: bytes) -> str:
    """Return the environment variable key for a property ``name``."""
    name = bytes(name).split(b"\0", 1)[0]
    # bytes.upper() only touches ASCII letters
    return os.fsdecode(name.replace(b".", b"_").upper())


def setenv(name: bytes, value: bytes, environ: Optional[MutableMapping[str, str]] = None) -> int:
    """Set (or, for an empty value, unset) the variable for ``name``."""
    if environ is None:
        environ = os.environ

    key = env_name(name)
    if not value:
        environ.pop(key, None)
        logger.debug("unset %s", key)
    else:
        environ[key] = os.fsdecode(bytes(value))
        logger.debug("set %s", key)
    return 0


def setenv_property(name: bytes, value: bytes) -> int:
    """Parser handler that writes into the process environment."""
    return setenv(name, value)


@dataclass
class EnvironSink:
    """Parser handler bound to an arbitrary mapping instead of ``os.environ``.

    ``operations`` records what was applied, in order, as ``(key, value)``
    with ``value`` ``None`` for an unset.
    """
    environ: MutableMapping[str, str] = field(default_factory=dict)
    operations: list[tuple[str, Optional[str]]] = field(default_factory=list)

    def __call__(self, name: bytes, value: bytes) -> int:
        result = setenv(name, value, self.environ)
        self.operations.append((env_name(name), os.fsdecode(bytes(value)) if value else None))
        return result
