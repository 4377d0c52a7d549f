import asyncio

from helpers import FakeLoader

from artwork_gallery.models import LoadState
from artwork_gallery.services.session_service import GallerySession


def loaded_session(page_index=1, **loader_kwargs):
    session = GallerySession(FakeLoader(**loader_kwargs), page_size=12)
    asyncio.run(session.on_page_change(page_index))
    return session


def test_selection_change_before_load_is_ignored():
    session = GallerySession(FakeLoader())
    assert session.on_selection_change({1, 2}) is False
    assert session.total_selected() == 0
    assert session.selected_records() == []


def test_count_submit_then_page_edit_updates_totals():
    session = loaded_session(page_index=2)

    ok, message = session.on_custom_count_submit("15")
    assert ok and message is None
    assert session.selected_ids() == {13, 14, 15}

    assert session.on_selection_change({14, 15})
    assert session.total_selected() == 14
    assert session.selection_summary() == "14 row(s) selected"


def test_invalid_count_submit_reports_message_and_keeps_state():
    session = loaded_session()
    session.on_custom_count_submit(5)
    session.on_selection_change({1, 2, 3, 4, 5, 9})

    ok, message = session.on_custom_count_submit("0")

    assert not ok
    assert message
    assert session.selection.virtual_count == 5
    assert session.selection.overrides == {9: True}


def test_edits_rejected_while_page_failed():
    session = loaded_session(page_index=1, failing_pages={3})
    asyncio.run(session.on_page_change(3))

    assert session.state is LoadState.ERROR
    assert session.error_message
    assert session.current_page == 1
    assert session.on_selection_change({1}) is False
    assert [record.id for record in session.records()][0] == 1


def test_footer_reflects_committed_page():
    session = loaded_session(page_index=9)
    assert session.footer_text() == "Showing 97 to 100 of 100 entries"
    assert session.total_pages == 9


def test_footer_for_empty_record_set():
    session = loaded_session(total=0)
    assert session.footer_text() == "Showing 0 to 0 of 0 entries"
    assert session.records() == []
