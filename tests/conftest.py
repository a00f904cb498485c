"""Shared fixtures: an in-memory drawing surface that records every call."""

import pytest

from planner_pdf.calendar_math import CalendarProvider
from planner_pdf.config import (NOTES_FRACTION_DEFAULT, REMARKABLE_HEIGHT,
                                REMARKABLE_MARGIN, REMARKABLE_WIDTH)
from planner_pdf.nodes import Geometry, PageArena
from planner_pdf.tree import build_children, create_root


class RecordingSurface:
    """Stands in for PdfSurface; text is 0.5 * font size wide per character."""

    def __init__(self, number=0, width=REMARKABLE_WIDTH, height=REMARKABLE_HEIGHT):
        self.number = number
        self.width = width
        self.height = height
        self.calls = []
        self.links = []
        self.texts = []

    def draw_line(self, x0, y0, x1, y1, width=1, level=0.0):
        self.calls.append(("line", (x0, y0, x1, y1)))

    def fill_rect(self, rect, level):
        self.calls.append(("rect", tuple(rect)))

    def place_text(self, text, x, y, font_size):
        self.calls.append(("text", text, x, y))
        self.texts.append(text)

    def text_width(self, text, font_size):
        return len(text) * font_size * 0.5

    def add_link(self, rect, target):
        self.calls.append(("link", tuple(rect), target.number))
        self.links.append((tuple(rect), target))

    def fill_dots(self, x0, y0, x1, y1, spacing, dot_size=2):
        self.calls.append(("dots", (x0, y0, x1, y1)))

    def fill_lines(self, x0, y0, x1, y1, gap, level=0.5, width=0.5):
        self.calls.append(("lines", (x0, y0, x1, y1)))

    def drawing_calls(self):
        """Every call except text measurement (which is not recorded)."""
        return list(self.calls)


class RecordingDocument:
    """Stands in for PlannerDocument without producing a PDF."""

    def __init__(self):
        self.surfaces = []
        self.saved_to = None

    def __len__(self):
        return len(self.surfaces)

    def new_surface(self, width, height):
        surface = RecordingSurface(len(self.surfaces), width, height)
        self.surfaces.append(surface)
        return surface

    def links(self):
        return [(s.number, target.number) for s in self.surfaces for _, target in s.links]

    def save(self, output_path):
        self.saved_to = output_path

    def close(self):
        pass


def expand(arena, node, calendar):
    """Recursively build the tree below ``node`` without drawing anything."""
    for child in build_children(arena, node, calendar):
        expand(arena, child, calendar)


@pytest.fixture
def calendar():
    return CalendarProvider()


@pytest.fixture
def geometry():
    return Geometry(page_width=REMARKABLE_WIDTH, page_height=REMARKABLE_HEIGHT,
                    margin_width=REMARKABLE_MARGIN, notes_fraction=NOTES_FRACTION_DEFAULT)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def document():
    return RecordingDocument()


@pytest.fixture
def make_tree(calendar, geometry):
    """Build a Main -> Year -> Month -> Day tree for ``num_years`` years."""
    def _make(start_year=2021, num_years=2):
        arena = PageArena()
        root = create_root(arena, start_year, num_years, geometry)
        expand(arena, root, calendar)
        return arena, root
    return _make
