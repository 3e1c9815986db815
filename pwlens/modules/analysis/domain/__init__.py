"""Password analysis domain layer."""
