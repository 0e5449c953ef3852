"""Topic names, modes, retention and discard policies, errors and per-topic options."""

__version__ = "0.1.0"
__all__ = ["topic"]