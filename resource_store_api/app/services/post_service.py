"""
Business logic for posts.

A post has a ``title``, a ``body`` and the ``userId`` of its author.
The author reference is not checked against the users collection.
"""

from typing import Optional

from .collection import Record, ResourceCollection, is_present


# Author assigned to new posts that do not name one.
DEFAULT_USER_ID = 1


class PostService(ResourceCollection):
    """In‑memory posts collection."""

    resource_name = "posts"
    label = "Post"
    required_fields = ("title", "body")

    def build(self, entity_id: int, payload: Record, current: Optional[Record] = None) -> Record:
        """Build a post record.

        A falsy ``userId`` defaults to ``DEFAULT_USER_ID`` on create and
        to the replaced post's author on replace.
        """
        user_id = payload.get("userId")
        if not is_present(user_id):
            user_id = current.get("userId") if current is not None else DEFAULT_USER_ID
        return {
            "id": entity_id,
            "title": payload["title"],
            "body": payload["body"],
            "userId": user_id,
        }
