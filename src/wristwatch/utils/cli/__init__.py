"""Command-line support for WristWatch."""
