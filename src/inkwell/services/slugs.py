"""Slug generation for article URLs."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable

from inkwell.db.time import Clock, system_clock

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_FALLBACK_SLUG = "article"


def slugify(title: str) -> str:
    """Return the URL-safe form of ``title``.

    Accented characters are transliterated to ASCII, everything else that is
    not a letter or digit collapses into single hyphens.

    >>> slugify("  Héllo, Wörld!  ")
    'hello-world'
    """
    ascii_title = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("-", ascii_title.lower()).strip("-")
    return slug or _FALLBACK_SLUG


def assign_slug(
    title: str,
    slug_exists: Callable[[str], bool],
    clock: Clock = system_clock,
) -> str:
    """Return a slug for ``title`` that ``slug_exists`` reports as free.

    Collisions get the current millisecond timestamp appended; the nonce is
    bumped until the candidate is free. No lock is taken, so two concurrent
    writers may still race and one of them fails on the unique constraint.
    """
    base = slugify(title)
    if not slug_exists(base):
        return base
    nonce = int(clock() * 1000)
    while slug_exists(f"{base}-{nonce}"):
        nonce += 1
    return f"{base}-{nonce}"
