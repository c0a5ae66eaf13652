"""Core configuration, dependencies and utilities."""
