# tests/services/test_slugs.py
"""Tests for slug generation and collision handling."""

import pytest

from inkwell.services.slugs import assign_slug, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("  Héllo, Wörld!  ", "hello-world"),
        ("C++ & Rust -- a comparison", "c-rust-a-comparison"),
        ("Ünïcödé", "unicode"),
        ("!!!", "article"),
        ("", "article"),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_free_slug_is_used_as_is(clock) -> None:
    assert assign_slug("Hello World", lambda slug: False, clock) == "hello-world"


def test_assignment_is_deterministic_for_a_fixed_clock(clock) -> None:
    taken = {"hello-world"}
    first = assign_slug("Hello World", taken.__contains__, clock)
    second = assign_slug("Hello World", taken.__contains__, clock)
    assert first == second == f"hello-world-{int(clock() * 1000)}"


def test_sequential_titles_with_same_normal_form_get_distinct_slugs(clock) -> None:
    taken: set[str] = set()
    for title in ("Hello World", "hello, world!", "HELLO   WORLD"):
        taken.add(assign_slug(title, taken.__contains__, clock))

    assert len(taken) == 3
    assert "hello-world" in taken


def test_nonce_is_bumped_until_free(clock) -> None:
    stamp = int(clock() * 1000)
    taken = {"post", f"post-{stamp}", f"post-{stamp + 1}"}
    assert assign_slug("Post", taken.__contains__, clock) == f"post-{stamp + 2}"
