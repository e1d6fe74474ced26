"""Seen-set persistence: one document identifier per line in ~/.arxiv-cli."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from arxiv_cli.models import SEEN_FILENAME

logger = logging.getLogger(__name__)


class SeenStoreError(OSError):
    """Raised when the seen set cannot be written back to disk."""


class SeenSet:
    """Identifiers of documents the user has marked as reviewed."""

    __slots__ = ("_ids",)

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: set[str] = set(ids)

    def mark(self, doc_id: str) -> None:
        self._ids.add(doc_id)

    def unmark(self, doc_id: str) -> None:
        self._ids.discard(doc_id)

    def contains(self, doc_id: str) -> bool:
        return doc_id in self._ids

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"SeenSet({sorted(self._ids)!r})"


def get_seen_path(override: str = "") -> Path:
    """Return the seen-set file path, honoring a configured override."""
    if override:
        return Path(override).expanduser()
    return Path.home() / SEEN_FILENAME


def load_seen_ids(path: Path) -> SeenSet:
    """Load the seen set from disk.

    A missing file is the normal first-run case and yields an empty set.
    An unreadable file is logged and also yields an empty set.
    """
    if not path.exists():
        logger.debug("No seen file at %s, starting empty", path)
        return SeenSet()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read seen file %s, starting empty: %s", path, e)
        return SeenSet()
    seen = SeenSet(line.strip() for line in text.splitlines() if line.strip())
    logger.debug("Loaded %d seen ids from %s", len(seen), path)
    return seen


def save_seen_ids(path: Path, seen: SeenSet) -> None:
    """Overwrite the seen file with one identifier per line.

    Raises:
        SeenStoreError: if the file (or its directory) cannot be written.
    """
    content = "".join(f"{doc_id}\n" for doc_id in sorted(seen))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise SeenStoreError(f"Failed to write seen file {path}: {e}") from e
    logger.debug("Saved %d seen ids to %s", len(seen), path)


__all__ = [
    "SeenSet",
    "SeenStoreError",
    "get_seen_path",
    "load_seen_ids",
    "save_seen_ids",
]
