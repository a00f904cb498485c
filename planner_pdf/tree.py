"""Construction of the Main -> Year -> Month -> Day page tree.

Children are created in date order and threaded into one sibling chain per
kind. The first child of a node continues the chain from the last child of
the node's own left sibling, so e.g. Dec 31 of one year links to Jan 1 of
the next.
"""

from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple

from .calendar_math import CalendarProvider
from .config import (MONTHS_PER_YEAR, NOTES_FRACTION_CALENDAR,
                     NOTES_FRACTION_DEFAULT, NOTES_FRACTION_PORTRAIT)
from .nodes import (BuildState, DayPeriod, Geometry, MainPeriod, MonthPeriod,
                    PageArena, PageKind, PageNode, Period, YearPeriod)


def _child_geometry(parent: Geometry, kind: PageKind) -> Geometry:
    if kind is PageKind.YEAR:
        fraction = NOTES_FRACTION_CALENDAR
    elif kind is PageKind.MONTH:
        fraction = NOTES_FRACTION_PORTRAIT if parent.portrait else NOTES_FRACTION_CALENDAR
    else:
        fraction = NOTES_FRACTION_DEFAULT
    return replace(parent, notes_fraction=fraction)


def _main_children(node: PageNode, calendar: CalendarProvider) -> List[Period]:
    period: MainPeriod = node.period
    return [YearPeriod(period.start_year + i) for i in range(period.num_years)]


def _year_children(node: PageNode, calendar: CalendarProvider) -> List[Period]:
    return [MonthPeriod(node.period.year, month) for month in range(1, MONTHS_PER_YEAR + 1)]


def _month_children(node: PageNode, calendar: CalendarProvider) -> List[Period]:
    period: MonthPeriod = node.period
    return [DayPeriod(day) for day in calendar.days_of_month(period.year, period.month)]


def _leaf_children(node: PageNode, calendar: CalendarProvider) -> List[Period]:
    return []


ChildPlan = Callable[[PageNode, CalendarProvider], List[Period]]

# kind -> (child kind, child period factory)
CHILD_PLANS: Dict[PageKind, Tuple[Optional[PageKind], ChildPlan]] = {
    PageKind.MAIN: (PageKind.YEAR, _main_children),
    PageKind.YEAR: (PageKind.MONTH, _year_children),
    PageKind.MONTH: (PageKind.DAY, _month_children),
    PageKind.WEEK: (None, _leaf_children),
    PageKind.DAY: (None, _leaf_children),
}


def child_kind_of(kind: PageKind) -> Optional[PageKind]:
    return CHILD_PLANS[kind][0]


def create_root(arena: PageArena, start_year: int, num_years: int,
                geometry: Geometry) -> PageNode:
    """Create the Main page; it has no siblings so it is linked immediately."""
    root = arena.add(PageKind.MAIN, MainPeriod(start_year, num_years), geometry)
    arena.advance(root, BuildState.LINKED)
    return root


def _chain_predecessor(arena: PageArena, node: PageNode) -> Optional[PageNode]:
    """Last child of the nearest left sibling of ``node`` that has children."""
    sibling = arena.left_of(node)
    while sibling is not None:
        if sibling.children:
            return arena[sibling.children[-1]]
        sibling = arena.left_of(sibling)
    return None


def build_children(arena: PageArena, node: PageNode,
                   calendar: CalendarProvider) -> List[PageNode]:
    """Create the children of ``node`` and thread their sibling links.

    Every created child ends up LINKED. The left sibling of ``node`` must
    already have its children, which holds when nodes are expanded in
    chain order.
    """
    if node.children:
        raise ValueError(f"{node!r} already has children")
    child_kind, plan = CHILD_PLANS[node.kind]
    periods = plan(node, calendar)
    if not periods:
        return []

    geometry = _child_geometry(node.geometry, child_kind)
    previous = _chain_predecessor(arena, node)
    created = []
    for period in periods:
        child = arena.add(child_kind, period, geometry, parent=node.handle)
        if previous is not None:
            arena.link_siblings(previous, child)
        arena.advance(child, BuildState.LINKED)
        created.append(child)
        previous = child
    return created
