"""Single source of truth for the strkit version string."""

__version__: str = "0.1.0"
