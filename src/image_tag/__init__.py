"""Image tag resolution for weekly maintenance windows."""

__version__ = "0.1.0"
