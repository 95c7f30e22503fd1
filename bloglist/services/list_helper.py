"""
Statistics over a collection of blogs.

Every function here is pure: it reads ``title``, ``author`` and ``likes``
from each entry, never mutates the input and never raises on empty input.
Entries may be mappings (request payloads, fixtures) or objects with
attributes (``BlogDB`` rows). A missing or null ``likes`` counts as zero.

When several entries or authors share the maximum, the first one seen in
input order wins.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypedDict


class FavoriteBlog(TypedDict):
    title: str | None
    author: str | None
    likes: int


class AuthorBlogCount(TypedDict):
    author: str | None
    blogs: int


class AuthorLikes(TypedDict):
    author: str | None
    likes: int


class Summary(TypedDict):
    total_likes: int
    favorite_blog: FavoriteBlog | None
    most_blogs: AuthorBlogCount | None
    most_likes: AuthorLikes | None


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def _entries(blogs: Any) -> Sequence[Any]:
    """Treat anything that is not a non-string sequence as empty."""
    if isinstance(blogs, Sequence) and not isinstance(blogs, str | bytes):
        return blogs
    return ()


def total_likes(blogs: Sequence[Any]) -> int:
    """
    Sum of ``likes`` over all entries.

    >>> total_likes([{"likes": 5}, {"likes": 7}])
    12
    >>> total_likes([])
    0
    """
    return sum(_likes(blog) for blog in _entries(blogs))


def favorite_blog(blogs: Sequence[Any]) -> FavoriteBlog | None:
    """
    The entry with the most likes, projected to ``title``, ``author`` and ``likes``.

    Returns None for empty input.
    """
    entries = _entries(blogs)
    if not entries:
        return None

    favorite = max(entries, key=_likes)
    return {
        "title": _field(favorite, "title"),
        "author": _field(favorite, "author"),
        "likes": _likes(favorite),
    }


def _tally(pairs: Iterable[tuple[str | None, int]]) -> dict[str | None, int]:
    totals: dict[str | None, int] = {}
    for author, amount in pairs:
        totals[author] = totals.get(author, 0) + amount
    return totals


def most_blogs(blogs: Sequence[Any]) -> AuthorBlogCount | None:
    """
    The author with the most entries and that entry count.

    Returns None for empty input.
    """
    entries = _entries(blogs)
    if not entries:
        return None

    counts = _tally((_field(blog, "author"), 1) for blog in entries)
    author, count = max(counts.items(), key=lambda item: item[1])
    return {"author": author, "blogs": count}


def most_likes(blogs: Sequence[Any]) -> AuthorLikes | None:
    """
    The author whose entries have the highest summed likes, and that sum.

    Returns None for empty input.
    """
    entries = _entries(blogs)
    if not entries:
        return None

    totals = _tally((_field(blog, "author"), _likes(blog)) for blog in entries)
    author, likes = max(totals.items(), key=lambda item: item[1])
    return {"author": author, "likes": likes}


def summarize(blogs: Sequence[Any]) -> Summary:
    """All four statistics in one mapping."""
    return {
        "total_likes": total_likes(blogs),
        "favorite_blog": favorite_blog(blogs),
        "most_blogs": most_blogs(blogs),
        "most_likes": most_likes(blogs),
    }
