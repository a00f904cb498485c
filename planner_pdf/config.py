"""Constants and run configuration for the planner generator."""

from dataclasses import dataclass, replace

# =============================================================================
# CONSTANTS
# =============================================================================

# reMarkable 2 page dimensions (landscape)
REMARKABLE_WIDTH = 1872
REMARKABLE_HEIGHT = 1404
REMARKABLE_MARGIN = 120

# Fraction of the page reserved for the notes section
NOTES_FRACTION_DEFAULT = 0.5
NOTES_FRACTION_CALENDAR = 0.25
NOTES_FRACTION_PORTRAIT = 0.085

FONT_NAME = "helv"

FONT_SIZES = {
    "title": 45,
    "notes_title": 35,
    "grid": 25,
    "thumbnail": 14,
}

# Gray levels (0 = black, 1 = white)
FILL_BLACK = 0.0
FILL_TITLE = 0.8
FILL_LIGHT = 0.9
FILL_DARK = 0.5

# Gap between title text and its clickable band
TITLE_PADDING_X = 20
# Horizontal distance between the title and the "<" / ">" arrows
NAV_OFFSET = 100

NOTES_LINE_GAP = 40
DOT_SPACING = 40

GRID_PADDING = 10
THUMBNAIL_PADDING = 2
# Height of the clickable label strip above a thumbnail
THUMBNAIL_LABEL_HEIGHT = 50

MONTHS_PER_YEAR = 12
YEAR_GRID = (3, 4)
MONTH_GRID = (6, 7)
DAYS_PER_WEEK = 7

# Weekdays use the C encoding: Sunday = 0 ... Saturday = 6
SUNDAY = 0
MONDAY = 1

DEFAULT_START_YEAR = 2021
DEFAULT_NUM_YEARS = 5
DEFAULT_FILENAME = "planner.pdf"


@dataclass(frozen=True)
class PlannerConfig:
    start_year: int = DEFAULT_START_YEAR
    num_years: int = DEFAULT_NUM_YEARS
    filename: str = DEFAULT_FILENAME
    first_day_of_week: int = SUNDAY
    left_handed: bool = False
    portrait: bool = False
    margin: float = REMARKABLE_MARGIN

    @property
    def page_width(self) -> float:
        return REMARKABLE_HEIGHT if self.portrait else REMARKABLE_WIDTH

    @property
    def page_height(self) -> float:
        return REMARKABLE_WIDTH if self.portrait else REMARKABLE_HEIGHT

    def validated(self) -> "PlannerConfig":
        """Return a copy with out-of-range values replaced by the defaults.

        Start years must lie in 1..2999 and the number of years in 1..99;
        the first day of the week is folded into 0..6.
        """
        start_year = self.start_year
        if not 0 < start_year < 3000:
            start_year = DEFAULT_START_YEAR
        num_years = self.num_years
        if not 0 < num_years < 100:
            num_years = DEFAULT_NUM_YEARS
        return replace(self,
                       start_year=start_year,
                       num_years=num_years,
                       first_day_of_week=self.first_day_of_week % DAYS_PER_WEEK)
