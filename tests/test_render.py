from __future__ import annotations

import pytest

from kilo_engine.buffer import expand_tabs, raw_column_for_render, render_column

TAB_STOP = 4


def test_expand_tabs_uses_fixed_width() -> None:
    assert expand_tabs(b"ab\tc", TAB_STOP) == b"ab    c"
    assert expand_tabs(b"plain", TAB_STOP) == b"plain"


def test_render_column_counts_tab_as_tab_stop() -> None:
    raw = b"\tab\t"

    assert render_column(raw, 0, TAB_STOP) == 0
    assert render_column(raw, 1, TAB_STOP) == 4
    assert render_column(raw, 3, TAB_STOP) == 6
    assert render_column(raw, 4, TAB_STOP) == 10


def test_raw_column_for_render_lands_inside_tab() -> None:
    raw = b"\tab"

    assert raw_column_for_render(raw, 0, TAB_STOP) == 0
    assert raw_column_for_render(raw, 3, TAB_STOP) == 0
    assert raw_column_for_render(raw, 4, TAB_STOP) == 1


def test_raw_column_for_render_past_end_maps_to_last_byte() -> None:
    assert raw_column_for_render(b"abc", 10, TAB_STOP) == 2
    assert raw_column_for_render(b"", 0, TAB_STOP) == -1


@pytest.mark.parametrize(
    "raw",
    [b"", b"abc", b"\t", b"a\tb\t\tc", b"\t\t\t", b"x\ty"],
)
def test_render_round_trip_within_one_tab_stop(raw: bytes) -> None:
    for k in range(len(raw) + 1):
        render = render_column(raw, k, TAB_STOP)
        back = raw_column_for_render(raw, render, TAB_STOP)
        assert abs(render_column(raw, back, TAB_STOP) - render) <= TAB_STOP
