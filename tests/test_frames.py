import polars as pl

from hexcube import Hex, ring_path, spiral_path
from hexcube.frames import frame_to_hexes, hexes_to_frame


def test_frame_preserves_emission_order():
    hexes = list(ring_path(Hex(-3, 1), 1))
    frame = hexes_to_frame(hexes)
    assert frame.columns == ["ordinal", "q", "r"]
    assert frame["ordinal"].to_list() == list(range(6))
    assert list(zip(frame["q"].to_list(), frame["r"].to_list())) == [(h.q, h.r) for h in hexes]


def test_frame_with_s_column():
    frame = hexes_to_frame(spiral_path(Hex(2, 2), 1), include_s=True)
    assert frame.height == 7
    assert frame.schema["s"] == pl.Int32
    assert (frame["q"] + frame["r"] + frame["s"]).to_list() == [0] * 7


def test_empty_frame_keeps_schema():
    frame = hexes_to_frame([])
    assert frame.height == 0
    assert frame.schema == {"ordinal": pl.Int64, "q": pl.Int32, "r": pl.Int32}


def test_frame_round_trip_after_shuffle():
    hexes = list(spiral_path(Hex(0, 0), 2))
    frame = hexes_to_frame(hexes).sort("q", "r")
    assert list(frame_to_hexes(frame)) == hexes
