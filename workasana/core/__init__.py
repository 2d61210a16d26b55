"""Core modules for Workasana."""
