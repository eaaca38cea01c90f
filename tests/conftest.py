# ABOUTME: Shared pytest fixtures for booklog tests.
# ABOUTME: Provides a fixed run date and sample collection files (valid, legacy, and corrupt).

import json
from datetime import date
from pathlib import Path

import pytest


@pytest.fixture
def fixed_today() -> date:
    """A fixed run date so yearRead resolution is deterministic."""
    return date(2024, 3, 14)


@pytest.fixture
def dune_answers() -> dict:
    """Answer set for Dune read today with a 5-star rating."""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "9780441013593",
        "yearRead": "2024-03-14",
        "rating": 5,
        "localCover": False,
    }


@pytest.fixture
def collection_file(tmp_path: Path) -> Path:
    """A collection file holding two books."""
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [
                {
                    "title": "The Name of the Rose",
                    "author": "Umberto Eco",
                    "isbn": "9780156001311",
                    "rating": 4,
                    "yearRead": "2023-07-01",
                },
                {
                    "title": "Neuromancer",
                    "author": "William Gibson",
                    "isbn": "9780441569595",
                    "rating": "",
                    "yearRead": "currently",
                    "localCover": True,
                },
            ],
            indent=2,
        )
    )
    return path


@pytest.fixture
def legacy_collection_file(tmp_path: Path) -> Path:
    """A collection written by an older revision: ISBN key, string rating, extra key."""
    path = tmp_path / "legacy.json"
    path.write_text(
        json.dumps(
            [
                {
                    "title": "Foundation",
                    "author": "Isaac Asimov",
                    "ISBN": "9780553293357",
                    "rating": "3",
                    "yearRead": "undated",
                    "coverUrl": "https://example.com/foundation.jpg",
                },
            ],
            indent=2,
        )
    )
    return path


@pytest.fixture
def corrupt_collection_file(tmp_path: Path) -> Path:
    """A collection file that is not valid JSON."""
    path = tmp_path / "corrupt.json"
    path.write_text("this is not json [")
    return path
