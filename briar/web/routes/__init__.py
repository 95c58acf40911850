"""API routers of the theme web application."""
