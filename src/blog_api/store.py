"""Post storage — Protocol + in-memory implementation."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from blog_api.models import Post, PostCreate

if TYPE_CHECKING:
    from blog_api.config import Settings


@runtime_checkable
class PostStore(Protocol):
    """Protocol for post storage backends."""

    def list(self) -> list[Post]: ...

    def create(self, candidate: PostCreate) -> Post: ...

    def find_by_id(self, post_id: int) -> Post | None: ...

    def remove(self, post_id: int) -> bool: ...


class MemoryPostStore:
    """In-memory post store.

    Posts are kept in an insertion-ordered dict keyed by id. Ids come from a
    counter that only moves forward, so a removed id is never handed out again.
    A single lock guards every operation; handlers run in a thread pool.
    """

    def __init__(self, initial: Iterable[Post] = ()) -> None:
        self._posts: dict[int, Post] = {}
        for post in initial:
            if post.id in self._posts:
                raise ValueError(f"duplicate post id {post.id}")
            self._posts[post.id] = post
        self._next_id = max(self._posts, default=0) + 1
        self._lock = threading.Lock()

    def list(self) -> list[Post]:
        with self._lock:
            return list(self._posts.values())

    def create(self, candidate: PostCreate) -> Post:
        with self._lock:
            post = Post(id=self._next_id, **candidate.model_dump())
            self._next_id += 1
            self._posts[post.id] = post
            return post

    def find_by_id(self, post_id: int) -> Post | None:
        with self._lock:
            return self._posts.get(post_id)

    def remove(self, post_id: int) -> bool:
        with self._lock:
            return self._posts.pop(post_id, None) is not None

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)


def seed_posts() -> list[Post]:
    """Sample posts present on a fresh start."""
    return [
        Post(
            id=1,
            title="Welcome to Go",
            content="Go is awesome for backend development!",
            author="Gopher",
        ),
        Post(
            id=2,
            title="Why Choose Go?",
            content="Fast, simple, and reliable.",
            author="Developer",
        ),
    ]


def create_post_store(settings: Settings) -> PostStore:
    """Factory: create the post store, seeded unless SEED_DATA is off."""
    return MemoryPostStore(seed_posts() if settings.seed_data else ())
