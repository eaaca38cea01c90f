# ABOUTME: Runtime configuration for booklog: known collection targets and date layout.
# ABOUTME: Values come from CLI options or BOOKLOG_* environment variables, never hard-coded paths.

from dataclasses import dataclass
from pathlib import Path

from booklog.records.types import DATE_FORMATS, DateFormat

DEFAULT_COLLECTION_PATH = Path("books.json")

FILE_ENVVAR = "BOOKLOG_FILE"
ALT_FILE_ENVVAR = "BOOKLOG_ALT_FILE"
DATE_FORMAT_ENVVAR = "BOOKLOG_DATE_FORMAT"

LOCAL_TARGET = "local"
ALT_TARGET = "alt"


@dataclass(frozen=True)
class CollectionTarget:
    """A named place a collection can live."""

    name: str
    path: Path


def known_targets(alt_path: Path | None = None) -> list[CollectionTarget]:
    """List the collection targets the operator can choose between.

    The local ./books.json is always first; a configured alternate follows.
    """
    targets = [CollectionTarget(LOCAL_TARGET, DEFAULT_COLLECTION_PATH)]
    if alt_path is not None:
        targets.append(CollectionTarget(ALT_TARGET, alt_path))
    return targets


def get_date_format(label: str) -> DateFormat:
    """Look up a supported date layout by its label, e.g. 'yyyy/mm/dd'."""
    try:
        return DATE_FORMATS[label]
    except KeyError as exc:
        supported = ", ".join(DATE_FORMATS)
        raise ValueError(f"Unsupported date format {label!r} (expected one of: {supported})") from exc
