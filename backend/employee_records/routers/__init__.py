"""Routers mounted on the FastAPI app."""
