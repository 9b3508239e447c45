"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "git": {
        "executable": "git",
        "cwd": "",
        "timeout_ms": 0,
    },
    "logging": {
        "level": "info",
        "format": "text",
        "file": "",
    },
}
