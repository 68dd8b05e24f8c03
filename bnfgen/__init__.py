"""Random string generation from BNF-style grammars."""

__version__ = "0.1.0"
__all__ = ["__version__"]