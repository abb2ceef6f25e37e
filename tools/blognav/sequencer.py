"""
Chronological neighbours of an article.

The collection is whatever ``sorted_articles`` produced for the listing
pages; "next" and "previous" are one step forward and back in that order.
Articles are matched by identifier, never by structural equality.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple, Union

from .articles import Article, normalize_identifier

ArticleRef = Union[Article, str]


def _identifier(ref: ArticleRef) -> str:
    if isinstance(ref, Article):
        return ref.identifier
    return normalize_identifier(ref)


def _position(current: ArticleRef, collection: Sequence[Article]) -> Optional[int]:
    wanted = _identifier(current)
    for i, item in enumerate(collection):
        if item.identifier == wanted:
            return i
    return None


def next_article(
    current: ArticleRef, collection: Sequence[Article]
) -> Optional[Article]:
    index = _position(current, collection)
    if index is None or index + 1 >= len(collection):
        return None
    return collection[index + 1]


def previous_article(
    current: ArticleRef, collection: Sequence[Article]
) -> Optional[Article]:
    index = _position(current, collection)
    # index 0 has no predecessor; collection[-1] would wrap to the end
    if index is None or index == 0:
        return None
    return collection[index - 1]


class ArticleSequence:
    """A sorted article collection with neighbour lookups."""

    def __init__(self, collection: Sequence[Article]):
        self._items: Tuple[Article, ...] = tuple(collection)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._items)

    def __contains__(self, ref) -> bool:
        if not isinstance(ref, (Article, str)):
            return False
        return _position(ref, self._items) is not None

    def next(self, current: ArticleRef) -> Optional[Article]:
        return next_article(current, self._items)

    def previous(self, current: ArticleRef) -> Optional[Article]:
        return previous_article(current, self._items)

    def neighbours(
        self, current: ArticleRef
    ) -> Tuple[Optional[Article], Optional[Article]]:
        return self.previous(current), self.next(current)
