"""Tag cloud generator."""
