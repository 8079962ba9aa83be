"""FastAPI adapter for the bidlint core engine."""
