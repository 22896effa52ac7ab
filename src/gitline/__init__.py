"""Single-line git working tree status for shell prompts."""

__version__ = "0.1.0"
