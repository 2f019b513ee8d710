"""Core namespace."""
