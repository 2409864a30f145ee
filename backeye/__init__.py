"""BackEye classroom monitoring data management API."""

__version__ = "1.0.0"
