"""Employee API: a small FastAPI scaffold with a greeting route."""
