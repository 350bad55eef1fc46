"""Site-wide post ordering, neighbor lookup, pagination and related posts."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from ..content.post import Post
from ..errors import DuplicateIdentifierError


class Neighbors(NamedTuple):
    """Chronological neighbors of a post; None at either end."""

    older: Post | None
    newer: Post | None


@dataclass(frozen=True)
class Page:
    """One page of the post listing. Page numbers start at 1."""

    number: int
    posts: tuple[Post, ...]
    total_pages: int

    @property
    def previous(self) -> int | None:
        return self.number - 1 if self.number > 1 else None

    @property
    def next(self) -> int | None:
        return self.number + 1 if self.number < self.total_pages else None


class Pagination:
    """Lazy, restartable sequence of pages over an ordered post tuple."""

    def __init__(self, posts: tuple[Post, ...], page_size: int):
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._posts = posts
        self.page_size = page_size

    def __len__(self) -> int:
        return math.ceil(len(self._posts) / self.page_size)

    def __iter__(self) -> Iterator[Page]:
        total = len(self)
        for i in range(total):
            start = i * self.page_size
            yield Page(
                number=i + 1,
                posts=self._posts[start : start + self.page_size],
                total_pages=total,
            )


def sort_key(post: Post) -> tuple[int, str]:
    """Newest first; same-day posts ordered by identifier."""
    return (-post.publication_date.toordinal(), post.identifier)


class PostCollection:
    """Immutable, ordered view of every post in a site.

    Raises:
        DuplicateIdentifierError: two input posts share an identifier
    """

    def __init__(self, posts: Iterable[Post]):
        posts = list(posts)
        counts = Counter(p.identifier for p in posts)
        duplicates = [ident for ident, n in counts.items() if n > 1]
        if duplicates:
            raise DuplicateIdentifierError(duplicates)

        self._posts: tuple[Post, ...] = tuple(sorted(posts, key=sort_key))
        self._index = {p.identifier: i for i, p in enumerate(self._posts)}

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def all(self) -> tuple[Post, ...]:
        return self._posts

    def get(self, identifier: str) -> Post:
        return self._posts[self._position(identifier)]

    def neighbors(self, post: Post) -> Neighbors:
        i = self._position(post.identifier)
        newer = self._posts[i - 1] if i > 0 else None
        older = self._posts[i + 1] if i + 1 < len(self._posts) else None
        return Neighbors(older=older, newer=newer)

    def paginate(self, page_size: int) -> Pagination:
        return Pagination(self._posts, page_size)

    def related(self, post: Post, max_count: int) -> list[Post]:
        """Posts sharing keyword/tag tokens with `post`, best matches first.

        Ordered by number of shared tokens, then recency, then identifier.
        """
        if max_count < 0:
            raise ValueError("max_count must be >= 0")
        tokens = post.tokens()
        if not tokens or max_count == 0:
            return []

        scored: list[tuple[int, Post]] = []
        for other in self._posts:
            if other.identifier == post.identifier:
                continue
            shared = len(tokens & other.tokens())
            if shared:
                scored.append((shared, other))

        scored.sort(key=lambda item: (-item[0], sort_key(item[1])))
        return [p for _, p in scored[:max_count]]

    def _position(self, identifier: str) -> int:
        try:
            return self._index[identifier]
        except KeyError:
            raise KeyError(f"post not in collection: {identifier}") from None
