"""Tests for per-kind thumbnail rendering."""

from datetime import date

import pytest

from planner_pdf.grid import Region
from planner_pdf.nodes import DayPeriod, PageKind
from planner_pdf.thumbnails import ThumbnailDispatcher

from conftest import RecordingSurface

CELL = Region(0, 0, 400, 400)


@pytest.fixture
def year_2021(make_tree):
    arena, root = make_tree(2021, 1)
    for number, day in enumerate(arena.nodes_of_kind(PageKind.DAY), start=1):
        arena.attach_surface(day, RecordingSurface(number))
    return arena, root


def test_month_thumbnail_draws_header_and_linked_days(year_2021, calendar, surface):
    arena, root = year_2021
    january = arena.nodes_of_kind(PageKind.MONTH)[0]
    dispatcher = ThumbnailDispatcher(arena, calendar, 0, 1404)

    dispatcher(surface, CELL, january)

    assert surface.texts[:7] == ["S", "M", "T", "W", "T", "F", "S"]
    assert surface.texts[7:] == [f"{d:02d}" for d in range(1, 32)]
    targets = [target for _, target in surface.links]
    assert targets == [day.surface for day in arena.children_of(january)]


@pytest.mark.parametrize("kind", [PageKind.MAIN, PageKind.YEAR, PageKind.DAY])
def test_other_kinds_draw_nothing(year_2021, calendar, surface, kind):
    arena, _ = year_2021
    node = arena.nodes_of_kind(kind)[0]
    dispatcher = ThumbnailDispatcher(arena, calendar, 0, 1404)

    dispatcher(surface, CELL, node)

    assert surface.calls == []


def test_week_kind_is_a_no_op(year_2021, calendar, surface):
    arena, _ = year_2021
    month = arena.nodes_of_kind(PageKind.MONTH)[0]
    dispatcher = ThumbnailDispatcher(arena, calendar, 0, 1404)

    dispatcher.render(surface, CELL, month, PageKind.WEEK, None)

    assert surface.calls == []


def test_overflowing_month_thumbnail_does_not_raise(year_2021, calendar, surface, geometry):
    arena, _ = year_2021
    january = arena.nodes_of_kind(PageKind.MONTH)[0]
    for extra in range(1, 11):
        arena.add(PageKind.DAY, DayPeriod(date(2021, 2, extra)), geometry, parent=january.handle)
    overflows = []
    dispatcher = ThumbnailDispatcher(arena, calendar, 0, 1404, overflows=overflows)

    dispatcher(surface, CELL, january)

    assert surface.links == []
    assert len(overflows) == 1
    assert (overflows[0].skip, overflows[0].count) == (5, 41)
