"""Analysis application layer."""
