"""Analysis infrastructure layer."""
