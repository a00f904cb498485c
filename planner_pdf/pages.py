"""Drawing helpers shared by every planner page.

Layout follows the reMarkable landscape page: a title band across the top,
a notes section on the writing-hand side and the page-specific content
beside it. Link targets are passed in already resolved; callers are
responsible for only handing over surfaces that exist.
"""

from .config import (FILL_DARK, FILL_TITLE, FONT_SIZES, NAV_OFFSET,
                     NOTES_LINE_GAP, TITLE_PADDING_X)
from .nodes import Geometry

NOTES_LABEL = "Notes"
LEFT_ARROW = "<"
RIGHT_ARROW = ">"


def title_height() -> float:
    """Bottom edge of the title band."""
    return FONT_SIZES["title"] * 2


def centered_x(surface, text: str, font_size: float, x_start: float, x_end: float) -> float:
    return x_start + (x_end - x_start) / 2 - surface.text_width(text, font_size) / 2


def draw_margin(surface, geometry: Geometry):
    x = geometry.margin_x
    surface.draw_line(x, 0, x, geometry.page_height, width=1)


def draw_title_separator(surface, geometry: Geometry):
    y = title_height()
    surface.draw_line(0, y, geometry.page_width, y, width=2)


def _draw_band_text(surface, text: str, x: float, target=None):
    """Title-band text on a gray background, optionally linked."""
    font_size = FONT_SIZES["title"]
    length = surface.text_width(text, font_size)
    band = (x - TITLE_PADDING_X, 0, x + length + TITLE_PADDING_X, title_height())
    surface.fill_rect(band, FILL_TITLE)
    surface.place_text(text, x, font_size + 10, font_size)
    if target is not None:
        surface.add_link(band, target)


def draw_title(surface, geometry: Geometry, title: str, parent_target=None):
    """Centered page title; clicking it goes to the parent page."""
    x = centered_x(surface, title, FONT_SIZES["title"], 0, geometry.page_width)
    _draw_band_text(surface, title, x, parent_target)
    draw_title_separator(surface, geometry)


def draw_navigation(surface, geometry: Geometry, title: str,
                    left_target=None, right_target=None):
    """Arrows either side of the title, linked to the sibling pages."""
    font_size = FONT_SIZES["title"]
    title_x = centered_x(surface, title, font_size, 0, geometry.page_width)
    if left_target is not None:
        _draw_band_text(surface, LEFT_ARROW, title_x - NAV_OFFSET, left_target)
    if right_target is not None:
        title_length = surface.text_width(title, font_size)
        arrow_length = surface.text_width(RIGHT_ARROW, font_size)
        _draw_band_text(surface, RIGHT_ARROW,
                        title_x + title_length + NAV_OFFSET - arrow_length, right_target)
    draw_title_separator(surface, geometry)


def draw_notes_section(surface, geometry: Geometry):
    """Ruled notes area with its divider on the writing-hand side."""
    font_size = FONT_SIZES["notes_title"]
    x_start, x_stop = geometry.notes_span()
    y_start = title_height()

    if geometry.left_handed:
        divider_x = x_start
        text_x = centered_x(surface, NOTES_LABEL, font_size, x_start, geometry.margin_right)
    else:
        divider_x = x_stop
        text_x = centered_x(surface, NOTES_LABEL, font_size, geometry.margin_left, x_stop)

    surface.draw_line(divider_x, y_start, divider_x, geometry.page_height, width=2)
    surface.place_text(NOTES_LABEL, text_x, y_start + font_size + 10, font_size)
    surface.fill_lines(x_start, y_start + 2 * font_size, x_stop,
                       geometry.page_height - 30, NOTES_LINE_GAP, level=FILL_DARK)


def draw_section_header(surface, geometry: Geometry, text: str) -> float:
    """Header centered over the content area; returns the y below it."""
    font_size = FONT_SIZES["notes_title"]
    x_start, x_stop = geometry.content_span()
    y = title_height() + font_size + 10
    surface.place_text(text, centered_x(surface, text, font_size, x_start, x_stop), y, font_size)
    return title_height() + font_size + 20


def draw_dot_area(surface, geometry: Geometry, top: float, spacing: float,
                  bottom_padding: float = 30, right_padding: float = 10,
                  left_padding: float = 30):
    x_start, x_stop = geometry.content_span()
    surface.fill_dots(x_start + left_padding, top, x_stop - right_padding,
                      geometry.page_height - bottom_padding, spacing)
