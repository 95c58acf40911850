"""Web surface of the theme helpers."""
