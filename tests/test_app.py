from pathlib import Path

from streamlit.testing.v1 import AppTest

from artwork_gallery.errors import FetchError
from artwork_gallery.services import data_loader
from artwork_gallery.utils import logging_config

APP_PATH = Path(__file__).resolve().parent.parent / "artwork_gallery" / "app.py"


async def failing_fetch(self, page_index, page_size):
    raise FetchError(page_index, "server returned 503")


def test_failed_first_load_is_reported_once_with_retry(monkeypatch):
    monkeypatch.setattr(data_loader.ArticPageLoader, "fetch_page", failing_fetch)
    monkeypatch.setattr(logging_config, "setup_logging", lambda *args, **kwargs: None)

    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()

    assert not at.exception
    assert len(at.error) == 1
    assert "503" in at.error[0].value
    assert len(at.warning) == 0
    assert any(button.label == "Retry" for button in at.button)
