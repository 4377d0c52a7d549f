from artwork_gallery.components.table import build_table_frame, checked_ids_from_frame
from artwork_gallery.config import TABLE_COLUMNS
from artwork_gallery.models import Artwork

RECORDS = (
    Artwork(id=11, title="Nighthawks", artist_display="Edward Hopper", date_start=1942, date_end=1942),
    Artwork(id=12, title="", inscriptions="signed lower right"),
    Artwork(id=13, title="American Gothic"),
)


def test_frame_marks_selected_rows_and_fills_blank_inscriptions():
    frame = build_table_frame(RECORDS, {11, 13})

    assert list(frame.columns) == TABLE_COLUMNS
    assert frame.index.tolist() == [11, 12, 13]
    assert frame["selected"].tolist() == [True, False, True]
    assert frame.loc[12, "title"] == ""
    assert frame.loc[13, "place_of_origin"] == ""
    assert frame.loc[13, "artist_display"] == ""
    assert frame.loc[12, "inscriptions"] == "signed lower right"
    assert frame.loc[13, "inscriptions"] == "N/A"
    assert frame.loc[11, "date_start"] == 1942


def test_checked_ids_round_trip_through_edits():
    frame = build_table_frame(RECORDS, {11})
    frame.loc[12, "selected"] = True
    frame.loc[11, "selected"] = False

    assert checked_ids_from_frame(frame) == {12}


def test_empty_frame_has_no_checked_ids():
    assert checked_ids_from_frame(build_table_frame((), set())) == set()
