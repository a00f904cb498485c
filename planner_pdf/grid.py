"""Grid layout of child pages.

A grid splits a rectangular region into ``rows x cols`` equal cells and
places one item per cell in row-major order, optionally leaving the first
``skip`` cells empty (a month grid starts on the weekday of the 1st). Each
placed page can be linked from its cell and can get a miniature rendering
of its own content drawn into the cell.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Set, Tuple

from .config import FILL_LIGHT, FONT_SIZES, GRID_PADDING, THUMBNAIL_LABEL_HEIGHT
from .errors import LayoutOverflow
from .nodes import NodeId, PageNode


RectTuple = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Region:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def as_tuple(self) -> RectTuple:
        return (self.x0, self.y0, self.x1, self.y1)


class GridLabel(NamedTuple):
    """A plain text cell with no page behind it (e.g. a weekday name)."""

    grid_label: str


@dataclass(frozen=True)
class CellPlacement:
    index: int
    row: int
    col: int
    rect: RectTuple
    label: str
    target: Optional[NodeId] = None
    link_rect: Optional[RectTuple] = None


@dataclass
class GridLayout:
    rows: int
    cols: int
    cell_width: float
    cell_height: float
    placements: List[CellPlacement] = field(default_factory=list)

    def link_pairs(self) -> Set[Tuple[RectTuple, NodeId]]:
        return {(p.link_rect, p.target) for p in self.placements if p.target is not None}


# Draws a child's miniature into a cell: (surface, cell region, child)
ThumbnailRenderer = Callable[[Any, Region, PageNode], None]


def check_fits(rows: int, cols: int, skip: int, count: int):
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")
    if skip + count > rows * cols:
        raise LayoutOverflow(rows, cols, skip, count)


def plan_cells(region: Region, rows: int, cols: int, skip: int, count: int,
               padding: float = GRID_PADDING) -> List[Tuple[int, int, int, RectTuple]]:
    """Padded cells that receive the ``count`` items, in placement order.

    Returns ``(index, row, col, rect)`` tuples. Raises ``LayoutOverflow``
    when ``skip + count`` exceeds the number of cells.
    """
    check_fits(rows, cols, skip, count)
    x_step = region.width / cols
    y_step = region.height / rows

    cells = []
    for row in range(rows):
        y = region.y0 + row * y_step
        for col in range(cols):
            if len(cells) == count:
                return cells
            index = row * cols + col
            if index < skip:
                continue
            x = region.x0 + col * x_step
            cells.append((index, row, col,
                          (x + padding, y + padding, x + x_step - padding, y + y_step - padding)))
    return cells


def create_grid(surface, region: Region, rows: int, cols: int, items: Sequence,
                create_links: bool = False,
                skip: int = 0,
                render_thumbnail: Optional[ThumbnailRenderer] = None,
                padding: float = GRID_PADDING,
                page_height: Optional[float] = None,
                label_in_middle: bool = False,
                font_size: float = FONT_SIZES["grid"]) -> GridLayout:
    """Lay ``items`` out on ``surface`` and link each cell to its page.

    Items need a ``grid_label``; linked items must be ``PageNode`` objects
    whose surface already exists. When ``render_thumbnail`` is given it is
    called for every placed item after its label is drawn, and the link is
    limited to the label strip so the thumbnail stays clickable on its own.

    Nothing is drawn when the items do not fit: ``LayoutOverflow`` is raised
    before the first surface call.
    """
    if page_height is not None and region.y1 > page_height:
        region = Region(region.x0, region.y0, region.x1, page_height)

    cells = plan_cells(region, rows, cols, skip, len(items), padding)
    # Resolve every target before drawing so a bad target leaves the page untouched
    targets = [item.target_surface() for item in items] if create_links else [None] * len(items)

    layout = GridLayout(rows, cols, region.width / cols, region.height / rows)
    for (index, row, col, rect), item, target in zip(cells, items, targets):
        x0, y0, x1, y1 = rect
        link_rect = None
        if create_links:
            strip_bottom = y1
            if render_thumbnail is not None:
                strip_bottom = min(y1, y0 + THUMBNAIL_LABEL_HEIGHT)
            link_rect = (x0, y0, x1, strip_bottom)
            surface.fill_rect(link_rect, FILL_LIGHT)

        label = item.grid_label
        text_x = x0 + (x1 - x0 - surface.text_width(label, font_size)) / 2
        if label_in_middle:
            text_y = y0 + (y1 - y0) / 2 + font_size * 0.35
        else:
            text_y = y0 + font_size * 1.2
        surface.place_text(label, text_x, text_y, font_size)

        if link_rect is not None:
            surface.add_link(link_rect, target)

        if render_thumbnail is not None:
            render_thumbnail(surface, Region(x0, y0, x1, y1), item)

        layout.placements.append(CellPlacement(
            index=index, row=row, col=col, rect=rect, label=label,
            target=item.handle if create_links else None, link_rect=link_rect))

    draw_grid_lines(surface, region, rows, cols)
    return layout


def draw_grid_lines(surface, region: Region, rows: int, cols: int):
    """Separator lines: one per row boundary, one per interior column."""
    y_step = region.height / rows
    x_step = region.width / cols
    for row in range(rows):
        y = region.y0 + row * y_step
        surface.draw_line(region.x0, y, region.x1, y, width=2)
    for col in range(1, cols):
        x = region.x0 + col * x_step
        surface.draw_line(x, region.y0, x, region.y1, width=1)
