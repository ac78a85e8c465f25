"""CookMuse: recipe video discovery."""

__version__ = "0.1.0"
