"""Row-set views of hex sequences backed by polars DataFrames."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

import polars as pl

from .hex import Hex

_HEX_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "ordinal": pl.Int64,
    "q": pl.Int32,
    "r": pl.Int32,
}

_CUBE_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    **_HEX_FRAME_SCHEMA,
    "s": pl.Int32,
}


def hexes_to_frame(hexes: Iterable[Hex], *, include_s: bool = False) -> pl.DataFrame:
    """Materialise ``hexes`` into a frame, one row per hex in emission order.

    ``ordinal`` records the position in the sequence so callers that depend on
    traversal order (rings, spirals, lines) can recover it after sorting.
    """

    schema = _CUBE_FRAME_SCHEMA if include_s else _HEX_FRAME_SCHEMA
    columns: Dict[str, list[int]] = {name: [] for name in schema}
    for ordinal, h in enumerate(hexes):
        columns["ordinal"].append(ordinal)
        columns["q"].append(h.q)
        columns["r"].append(h.r)
        if include_s:
            columns["s"].append(h.s)
    return pl.DataFrame(columns, schema=schema)


def frame_to_hexes(frame: pl.DataFrame) -> Iterator[Hex]:
    """Yield the hexes stored in ``frame`` in ``ordinal`` order."""

    if "ordinal" in frame.columns:
        frame = frame.sort("ordinal")
    for q, r in frame.select("q", "r").iter_rows():
        yield Hex(int(q), int(r))
