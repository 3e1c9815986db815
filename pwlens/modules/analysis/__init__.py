"""Password analysis module."""
