"""collider-gen: collision geometry from sprite transparency."""

__version__ = "0.1.0"
