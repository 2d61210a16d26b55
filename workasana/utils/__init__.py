"""Credential helpers for Workasana."""
