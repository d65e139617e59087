"""Command line interface for the attendance backend and device client."""
