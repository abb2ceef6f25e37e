#!/usr/bin/env python3
from __future__ import annotations

import pathlib
import re

# ---------- Paths

# This assumes config.py sits in tools/blognav/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
SITE_CONFIG_NAME = "site.yml"

# ---------- Config

CONTENT_DIR_NAME = "content"
CONTENT_SUFFIXES = (".md", ".markdown", ".html")
ARTICLE_KIND = "article"
DEFAULT_KIND = "page"
SORT_ORDERS = ("descending", "ascending")
DEFAULT_SORT = "descending"

# First key found wins.
CREATED_AT_KEYS = ("created_at", "date", "publishDate")

# Tried in order after ISO 8601 for string dates.
DATE_FORMATS_TO_TRY = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M %z",
    "%d-%m-%Y",
)

# Some shared regexes

MULTI_SLASH = re.compile(r"/{2,}")
