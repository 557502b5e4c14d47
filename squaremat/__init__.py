"""Square matrices of floats with arithmetic operators, and a demo command."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]