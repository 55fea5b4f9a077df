"""Shared utilities for WristWatch."""
