from __future__ import annotations

import pathlib
import sys
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .config import (
    ARTICLE_KIND,
    CONTENT_SUFFIXES,
    CREATED_AT_KEYS,
    DEFAULT_KIND,
)
from .utils import (
    coerce_datetime,
    natural_key,
    parse_frontmatter,
    _norm_text,
)


class ArticleError(ValueError):
    """Content item that cannot take part in the article listing."""


def normalize_identifier(identifier: str) -> str:
    parts = [p for p in str(identifier).split("/") if p]
    return "/" + "".join(f"{p}/" for p in parts)


@dataclass(frozen=True, eq=False)
class Article:
    """
    One content item of the site.

    Items compare and hash by ``identifier`` only, so two records for the
    same file are the same article even if their other fields differ.
    """

    identifier: str
    created_at: Optional[datetime] = None
    content: str = ""
    kind: str = DEFAULT_KIND
    title: str = ""
    attributes: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self, "identifier", normalize_identifier(self.identifier)
        )
        if self.created_at is not None:
            created_at = coerce_datetime(self.created_at)
            if created_at is None:
                raise ArticleError(
                    f"{self.identifier}: unparseable created_at "
                    f"{self.created_at!r}"
                )
            object.__setattr__(self, "created_at", created_at)
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    def __eq__(self, other):
        if not isinstance(other, Article):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self):
        return hash(self.identifier)

    @property
    def is_article(self) -> bool:
        return self.kind == ARTICLE_KIND


def identifier_for(path: pathlib.Path, content_dir: pathlib.Path) -> str:
    parts = list(path.relative_to(content_dir).with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts = parts[:-1]
    return normalize_identifier("/".join(parts))


def article_from_file(
    path: pathlib.Path, content_dir: pathlib.Path
) -> Article:
    rel = path.relative_to(content_dir).as_posix()
    try:
        text = _norm_text(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ArticleError(f"{rel}: not valid UTF-8") from exc
    fm, body = parse_frontmatter(text)
    if fm is None:
        if text.lstrip().startswith("---\n"):
            print(
                f"! {rel}: unterminated frontmatter, loaded as a page",
                file=sys.stderr,
            )
        fm, body = {}, text
    if not isinstance(fm, dict):
        raise ArticleError(f"{rel}: frontmatter is not a mapping")

    attrs = dict(fm)
    kind = str(attrs.pop("kind", None) or DEFAULT_KIND)

    stem = path.parent.name if path.stem == "index" else path.stem
    title = attrs.pop("title", None) or stem.replace("-", " ").title()

    identifier = attrs.pop("identifier", None) or identifier_for(
        path, content_dir
    )

    raw_date = None
    for key in CREATED_AT_KEYS:
        if attrs.get(key) is not None:
            raw_date = attrs.pop(key)
            break

    created_at = None
    if raw_date is not None:
        created_at = coerce_datetime(raw_date)
        if created_at is None:
            raise ArticleError(f"{rel}: unparseable date {raw_date!r}")
    if kind == ARTICLE_KIND and created_at is None:
        raise ArticleError(
            f"{rel}: article has no creation date "
            f"(set one of {', '.join(CREATED_AT_KEYS)})"
        )

    return Article(
        identifier=identifier,
        created_at=created_at,
        content=body,
        kind=kind,
        title=str(title),
        attributes=attrs,
    )


def load_articles(content_dir: pathlib.Path) -> List[Article]:
    """
    Load every content item below ``content_dir``.

    Hidden files and files with other suffixes are ignored. The result is in
    natural order of the relative path, which is also the order duplicate
    identifiers are reported in.
    """
    paths = [
        p
        for p in content_dir.rglob("*")
        if p.is_file()
        and p.suffix.lower() in CONTENT_SUFFIXES
        and not any(
            part.startswith(".")
            for part in p.relative_to(content_dir).parts
        )
    ]
    paths.sort(key=lambda p: natural_key(p.relative_to(content_dir).as_posix()))

    items: List[Article] = []
    seen = {}
    for p in paths:
        item = article_from_file(p, content_dir)
        rel = p.relative_to(content_dir).as_posix()
        if item.identifier in seen:
            raise ArticleError(
                f"{rel}: identifier {item.identifier} already used by "
                f"{seen[item.identifier]}"
            )
        seen[item.identifier] = rel
        items.append(item)
    return items


def articles(items: Iterable[Article]) -> List[Article]:
    return [item for item in items if item.is_article]


def sorted_articles(
    items: Iterable[Article], descending: bool = True
) -> Tuple[Article, ...]:
    """
    Articles ordered by creation time, newest first unless ``descending`` is
    False. Equal timestamps keep identifier order in both directions.

    Listing pages and neighbour lookups must both use this ordering.
    """
    selected = articles(items)
    undated = [a.identifier for a in selected if a.created_at is None]
    if undated:
        raise ArticleError(
            "articles without a creation date: " + ", ".join(undated)
        )
    ordered = sorted(selected, key=lambda a: natural_key(a.identifier))
    ordered.sort(key=lambda a: a.created_at, reverse=descending)
    return tuple(ordered)
