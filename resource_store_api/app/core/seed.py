"""Default records loaded into a fresh store."""

from typing import Any, Dict, List


DEFAULT_USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "John Doe", "email": "john@example.com"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
]

DEFAULT_POSTS: List[Dict[str, Any]] = [
    {"id": 1, "title": "First Post", "body": "This is my first post", "userId": 1},
    {"id": 2, "title": "Second Post", "body": "This is my second post", "userId": 1},
    {"id": 3, "title": "Hello World", "body": "Just saying hello!", "userId": 2},
]
