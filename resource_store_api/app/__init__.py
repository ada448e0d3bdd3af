"""
Application package.

``main`` assembles the FastAPI app; ``core`` holds settings, logging,
error rendering and seed data; ``services`` holds the in‑memory
collections and the store that owns them; ``api`` holds the routes;
``schemas`` documents the payloads.
"""

from .main import app, create_app  # noqa: F401
