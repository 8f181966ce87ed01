"""Rules and pygame drawing helpers for a retro grid-based snake game."""

__version__ = "1.0.0"
__all__ = ["__version__"]