# ABOUTME: JSON-file persistence for the reading-log collection.
# ABOUTME: Loads the full record list, appends, and rewrites it atomically via temp file + rename.

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from booklog.records.normalizer import normalize, record_to_dict
from booklog.records.types import BookRecord

logger = logging.getLogger(__name__)


class CollectionError(Exception):
    """Base class for collection load/save failures."""


class CollectionFormatError(CollectionError):
    """Raised when a collection file is not a JSON array of book objects."""


class CollectionWriteError(CollectionError):
    """Raised when the collection cannot be written back to disk."""


def append(collection: list[BookRecord], record: BookRecord) -> list[BookRecord]:
    """Return a new collection with record added at the end.

    No deduplication is done; the same ISBN may appear more than once.
    """
    return [*collection, record]


def _default_file_mode() -> int:
    """Mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _cleanup_temp(path: Path) -> None:
    """Remove a leftover temp file if it exists."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass


class CollectionStore:
    """A collection of BookRecords stored as one JSON array in a file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def ensure(self) -> bool:
        """Create an empty collection at the path if none exists.

        Returns:
            True if a new file was created.
        """
        if self.exists():
            return False
        logger.debug("Initializing empty collection at %s", self._path)
        self.save([])
        return True

    def load(self) -> list[BookRecord]:
        """Read the whole collection, or an empty list if the file is missing.

        Raises:
            CollectionFormatError: If the file is not valid JSON, is not an
                array of objects, or an entry lacks required fields.
        """
        if not self.exists():
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CollectionFormatError(f"Could not read {self._path}: {exc}") from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CollectionFormatError(f"{self._path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise CollectionFormatError(f"{self._path} does not contain a JSON array")

        records = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise CollectionFormatError(
                    f"{self._path}: entry {index} is not a JSON object"
                )
            try:
                records.append(normalize(entry))
            except ValueError as exc:
                raise CollectionFormatError(f"{self._path}: entry {index}: {exc}") from exc

        logger.debug("Loaded %d record(s) from %s", len(records), self._path)
        return records

    def save(self, collection: list[BookRecord]) -> None:
        """Overwrite the file with the full collection.

        The JSON is written to a temp file in the same directory and renamed
        over the target, so an interrupted write leaves the old file intact.

        Raises:
            CollectionWriteError: If the directory or file cannot be written.
        """
        payload = json.dumps(
            [record_to_dict(record) for record in collection],
            indent=2,
            ensure_ascii=False,
        )

        # Write through a symlinked collection to the file it points at.
        target = self._path.resolve()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as exc:
            raise CollectionWriteError(f"Could not write {self._path}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload + "\n")
                handle.flush()
                os.fsync(handle.fileno())
            if target.exists():
                shutil.copymode(target, tmp_path)
            else:
                os.chmod(tmp_path, _default_file_mode())
            os.replace(tmp_path, target)
        except OSError as exc:
            _cleanup_temp(tmp_path)
            raise CollectionWriteError(f"Could not write {self._path}: {exc}") from exc

        logger.debug("Wrote %d record(s) to %s", len(collection), self._path)

    def add(self, record: BookRecord) -> list[BookRecord]:
        """Load, append record, and save. Returns the saved collection."""
        collection = append(self.load(), record)
        self.save(collection)
        return collection
