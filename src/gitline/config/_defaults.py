"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be passed straight to deep_merge,
which never mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "resolver": "dulwich",
    "untracked": "exclude",
    "symbols": {
        "staged": "^",
        "renamed": "~",
        "modified": "~",
        "deleted": "-",
        "untracked": "+",
        "clean": "✓",
        "separator": "",
    },
    "labels": {
        "detached": "HEAD",
        "unborn": "(no branch)",
    },
    "logging": {
        "level": "warning",
        "format": "json",
        "file": "",
    },
}
