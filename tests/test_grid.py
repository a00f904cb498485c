"""Tests for the grid layout engine."""

import pytest

from planner_pdf.errors import BuildOrderError, LayoutOverflow
from planner_pdf.grid import GridLabel, Region, create_grid, plan_cells
from planner_pdf.nodes import PageKind

from conftest import RecordingSurface

REGION = Region(100, 200, 800, 800)


def surfaced(arena, nodes):
    for number, node in enumerate(nodes, start=1):
        arena.attach_surface(node, RecordingSurface(number))
    return nodes


@pytest.fixture
def january_2021(make_tree, calendar):
    arena, root = make_tree(2021, 1)
    month = arena.children_of(arena.children_of(root)[0])[0]
    days = surfaced(arena, arena.children_of(month))
    skip = calendar.leading_skip(2021, 1, 0)
    return arena, days, skip


def test_january_2021_fills_six_by_seven_exactly(surface, january_2021):
    arena, days, skip = january_2021
    assert skip == 5

    layout = create_grid(surface, REGION, 6, 7, days, create_links=True, skip=skip)

    indexes = [p.index for p in layout.placements]
    assert indexes == list(range(5, 36))
    assert layout.placements[0].label == "01"
    assert (layout.placements[0].row, layout.placements[0].col) == (0, 5)
    assert layout.placements[1].index == 6
    assert layout.placements[-1].label == "31"
    assert (layout.placements[-1].row, layout.placements[-1].col) == (5, 0)
    assert len(surface.links) == 31
    assert [target for _, target in surface.links] == [d.surface for d in days]


def test_year_grid_exactly_fills_three_by_four(make_tree, surface):
    arena, root = make_tree(2021, 1)
    months = surfaced(arena, arena.children_of(arena.children_of(root)[0]))

    layout = create_grid(surface, REGION, 3, 4, months, create_links=True)

    assert [p.index for p in layout.placements] == list(range(12))
    assert [p.label for p in layout.placements][:3] == ["Jan", "Feb", "Mar"]


def test_trailing_cells_stay_blank(surface, january_2021):
    arena, days, _ = january_2021

    layout = create_grid(surface, REGION, 6, 7, days, create_links=True, skip=6)

    assert layout.placements[-1].index == 36
    assert len(layout.placements) == 31


def test_overflow_draws_nothing(surface, january_2021):
    arena, days, _ = january_2021

    with pytest.raises(LayoutOverflow) as excinfo:
        create_grid(surface, REGION, 5, 7, days, create_links=True, skip=5)

    assert surface.calls == []
    exc = excinfo.value
    assert (exc.rows, exc.cols, exc.skip, exc.count) == (5, 7, 5, 31)
    assert "rows=5" in str(exc)


def test_placement_is_idempotent(january_2021):
    arena, days, skip = january_2021
    first, second = RecordingSurface(), RecordingSurface()

    layout_a = create_grid(first, REGION, 6, 7, days, create_links=True, skip=skip)
    layout_b = create_grid(second, REGION, 6, 7, days, create_links=True, skip=skip)

    assert [p.rect for p in layout_a.placements] == [p.rect for p in layout_b.placements]
    assert layout_a.link_pairs() == layout_b.link_pairs()
    assert first.calls == second.calls


def test_cells_are_uniform_and_padded():
    cells = plan_cells(Region(0, 0, 700, 600), 6, 7, skip=0, count=2, padding=10)

    assert cells[0] == (0, 0, 0, (10, 10, 90, 90))
    assert cells[1] == (1, 0, 1, (110, 10, 190, 90))


def test_links_cover_label_strip_when_thumbnails_are_drawn(make_tree, surface):
    arena, root = make_tree(2021, 1)
    months = surfaced(arena, arena.children_of(arena.children_of(root)[0]))
    drawn = []

    layout = create_grid(surface, REGION, 3, 4, months, create_links=True,
                         render_thumbnail=lambda s, region, node: drawn.append((region, node)),
                         padding=10)

    first = layout.placements[0]
    assert first.link_rect == (first.rect[0], first.rect[1], first.rect[2], first.rect[1] + 50)
    assert [node for _, node in drawn] == months
    assert drawn[0][0].as_tuple() == first.rect


def test_link_to_unsurfaced_page_is_rejected(make_tree, surface):
    arena, root = make_tree(2021, 1)
    months = arena.children_of(arena.children_of(root)[0])

    with pytest.raises(BuildOrderError):
        create_grid(surface, REGION, 3, 4, months, create_links=True)
    assert surface.calls == []


def test_label_grid_draws_separators(surface):
    labels = [GridLabel(name) for name in ("S", "M", "T", "W", "T", "F", "S")]

    layout = create_grid(surface, Region(0, 0, 700, 50), 1, 7, labels, label_in_middle=True)

    assert layout.link_pairs() == set()
    lines = [call for call in surface.calls if call[0] == "line"]
    assert len(lines) == 1 + 6
    assert surface.texts == ["S", "M", "T", "W", "T", "F", "S"]


def test_region_is_clipped_to_page_height(surface):
    layout = create_grid(surface, Region(0, 0, 100, 2000), 2, 1,
                         [GridLabel("a"), GridLabel("b")], page_height=1000, padding=0)

    assert layout.placements[1].rect == (0, 500, 100, 1000)


@pytest.mark.parametrize("rows,cols,skip", [(0, 7, 0), (6, 0, 0), (6, 7, -1)])
def test_invalid_grid_shape(surface, rows, cols, skip):
    with pytest.raises(ValueError):
        create_grid(surface, REGION, rows, cols, [], skip=skip)


def test_nodes_of_other_kinds_can_be_placed(make_tree, surface):
    arena, root = make_tree(2021, 2)
    years = surfaced(arena, arena.nodes_of_kind(PageKind.YEAR))

    layout = create_grid(surface, REGION, 2, 1, years, create_links=True, label_in_middle=True)

    assert [p.label for p in layout.placements] == ["2021", "2022"]
