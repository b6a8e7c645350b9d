"""Single source of truth for the installer version."""

__version__: str = "1.0.0"
