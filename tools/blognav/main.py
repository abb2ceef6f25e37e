#!/usr/bin/env python3
"""
Navigation manifest for the blog build.

- Reads optional `site.yml` at the repo root:
  content_dir (default: content), sort (descending | ascending),
  url_prefix (default: none)
- Loads every content item under content_dir (YAML frontmatter)
- Orders `kind: article` items the way listing pages do
- Prints YAML to stdout: articles -> identifier, title, url, created_at,
  prev?, next?

Progress goes to stderr so the manifest can be piped into the site generator.
"""

from __future__ import annotations

import pathlib
import sys
from typing import NoReturn, Optional

import yaml

from .articles import ArticleError, load_articles, sorted_articles
from .config import (
    CONTENT_DIR_NAME,
    DEFAULT_SORT,
    ROOT,
    SITE_CONFIG_NAME,
    SORT_ORDERS,
)
from .navigation import build_navigation
from .utils import read_yaml


def _fail(msg: str) -> NoReturn:
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


def main(root: Optional[pathlib.Path] = None) -> None:
    if root is None:
        root = pathlib.Path(sys.argv[1]) if len(sys.argv) > 1 else ROOT

    settings = read_yaml(root / SITE_CONFIG_NAME)
    if not isinstance(settings, dict):
        _fail(f"{SITE_CONFIG_NAME} must be a mapping")

    sort = settings.get("sort") or DEFAULT_SORT
    if sort not in SORT_ORDERS:
        _fail(
            f"unknown sort order {sort!r} in {SITE_CONFIG_NAME} "
            f"(expected one of {', '.join(SORT_ORDERS)})"
        )

    for key in ("content_dir", "url_prefix"):
        value = settings.get(key)
        if value is not None and not isinstance(value, str):
            _fail(
                f"{key} in {SITE_CONFIG_NAME} must be a string, got {value!r}"
            )

    content_dir = root / (settings.get("content_dir") or CONTENT_DIR_NAME)
    if not content_dir.is_dir():
        _fail(f"content directory {content_dir} missing")

    try:
        items = load_articles(content_dir)
        collection = sorted_articles(items, descending=sort == "descending")
    except ArticleError as exc:
        _fail(str(exc))

    if not collection:
        print(f"- no articles in {content_dir}", file=sys.stderr)

    nav = build_navigation(collection, prefix=settings.get("url_prefix") or "")
    print(
        f"✓ navigation for {len(collection)} articles "
        f"({len(items)} items, {sort})",
        file=sys.stderr,
    )
    sys.stdout.write(
        yaml.safe_dump({"articles": nav}, sort_keys=False, allow_unicode=True)
    )


if __name__ == "__main__":
    main()
