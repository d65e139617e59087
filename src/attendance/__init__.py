"""Attendance backend: teacher identity management and REST API."""

__version__ = "1.0.0"
