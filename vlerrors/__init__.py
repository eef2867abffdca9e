"""An exception hierarchy with messages and argument details."""

__version__ = "0.1.0"
__all__ = ["exceptions"]