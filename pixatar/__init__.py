"""Generate pixel art avatar images from the bits of a username."""

__version__ = "0.1.0"
__all__ = ["__version__"]