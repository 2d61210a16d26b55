"""Domain operations for Workasana."""
