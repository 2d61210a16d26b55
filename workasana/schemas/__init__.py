"""Pydantic schemas for Workasana."""
