"""
Top‑level package for the Resource Store API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``resource_store_api.app.main:app``.
"""

__all__ = []
