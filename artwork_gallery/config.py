"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"
LOG_DIR = Path(os.getenv("ARTWORK_GALLERY_LOG_DIR", Path.home() / ".artwork_gallery" / "logs"))

ARTIC_API_URL = os.getenv("ARTIC_API_URL", "https://api.artic.edu/api/v1").rstrip("/")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("ARTIC_TIMEOUT", "10"))

DEFAULT_PAGE_SIZE = 12

ARTWORK_FIELDS = [
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]

TABLE_COLUMNS = [
    "selected",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]

COLUMN_LABELS = {
    "selected": "",
    "title": "Title",
    "place_of_origin": "Origin",
    "artist_display": "Artist",
    "inscriptions": "Inscriptions",
    "date_start": "Start Date",
    "date_end": "End Date",
}

MISSING_TEXT = "N/A"
