"""tickbox - a minimal interactive terminal checklist."""

__version__ = "0.1.0"
