"""
The resource store.

``ResourceStore`` owns one collection per resource family.  A single
instance is created per application (see ``main.create_app``) and
handed to request handlers through the ``get_store`` dependency, so
tests can build as many independent stores as they need.
"""

from typing import Dict, Iterable, Optional

from ..core.seed import DEFAULT_POSTS, DEFAULT_USERS
from .collection import Record, ResourceCollection
from .post_service import PostService
from .user_service import UserService


class ResourceStore:
    """Container for the ``users`` and ``posts`` collections."""

    def __init__(self, users: UserService, posts: PostService) -> None:
        self.users = users
        self.posts = posts
        self._collections: Dict[str, ResourceCollection] = {
            users.resource_name: users,
            posts.resource_name: posts,
        }

    @classmethod
    def from_seed(
        cls,
        users: Optional[Iterable[Record]] = None,
        posts: Optional[Iterable[Record]] = None,
    ) -> "ResourceStore":
        """Build a store whose collections start with the given records."""
        return cls(UserService(users), PostService(posts))

    @classmethod
    def seeded(cls) -> "ResourceStore":
        """Build a store holding the default seed data."""
        return cls.from_seed(DEFAULT_USERS, DEFAULT_POSTS)

    @classmethod
    def empty(cls) -> "ResourceStore":
        return cls.from_seed()

    def collection(self, resource_name: str) -> ResourceCollection:
        """Return the collection serving ``/api/<resource_name>``.

        Raises ``KeyError`` for an unknown resource name.
        """
        return self._collections[resource_name]

    @property
    def resource_names(self):
        return list(self._collections)
