"""API routers for Workasana."""
