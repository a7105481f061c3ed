"""Give legacy articles created before slugs existed a slug of their own."""
from __future__ import annotations

import argparse
import logging
import sys

from inkwell.core.errors import StoreError
from inkwell.services.slugs import slugify
from inkwell.services.store import DocumentStore

logger = logging.getLogger(__name__)


def backfill_slugs(store: DocumentStore, dry_run: bool = False) -> dict[int, str]:
    """Assign a slug to every article that has none.

    A slug already taken by another article gets the article id appended.

    Returns:
        Mapping of article id to the slug it was (or would be) given
    """
    assigned: dict[int, str] = {}
    for article in store.list_unslugged_articles():
        slug = slugify(article.title)
        if slug in assigned.values() or store.slug_exists(slug):
            slug = f"{slug}-{article.id}"
        assigned[article.id] = slug
        if not dry_run:
            store.update_article(article.id, slug=slug)
        logger.info("Article %s -> %s%s", article.id, slug, " (dry run)" if dry_run else "")
    return assigned


def main() -> None:
    from inkwell.db.session import SessionLocal, create_tables

    parser = argparse.ArgumentParser(description="Backfill slugs on legacy articles")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the slugs that would be assigned without writing them.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="[backfill_slugs] %(message)s")
    create_tables()
    try:
        assigned = backfill_slugs(DocumentStore(SessionLocal), dry_run=args.dry_run)
    except StoreError as exc:
        print(f"[backfill_slugs] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"[backfill_slugs] {len(assigned)} article(s) updated")


if __name__ == "__main__":
    main()
