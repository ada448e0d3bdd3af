"""
API package.

``router.py`` exposes the top‑level ``router`` combining the health
check, one CRUD router per resource family under ``/api`` and the
front‑end fallback.
"""
