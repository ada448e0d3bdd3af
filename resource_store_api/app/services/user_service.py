"""
Business logic for users.

Users carry a ``name`` and an ``email``; both are required on create
and replace.  Neither is checked for format or uniqueness.
"""

from typing import Optional

from .collection import Record, ResourceCollection


class UserService(ResourceCollection):
    """In‑memory users collection."""

    resource_name = "users"
    label = "User"
    required_fields = ("name", "email")

    def build(self, entity_id: int, payload: Record, current: Optional[Record] = None) -> Record:
        return {"id": entity_id, "name": payload["name"], "email": payload["email"]}
