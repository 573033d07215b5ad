"""Mini Aventura: a small room-and-item text adventure engine."""

__version__ = "1.0.0"
