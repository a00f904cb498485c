"""Page tree data model.

Every page of the planner is a ``PageNode`` owned by a single ``PageArena``.
Nodes refer to each other (parent, left/right sibling, children) through
integer handles into the arena, so the arena owns the whole tree and is
discarded as a unit.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .calendar_math import date_to_string
from .errors import BuildOrderError

NodeId = int


class PageKind(Enum):
    MAIN = "main"
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class BuildState(IntEnum):
    """Lifecycle of a node; states are only ever entered in this order."""

    UNBUILT = 0
    LINKED = 1
    SURFACED = 2
    CHILDREN_BUILT = 3
    ANNOTATED = 4


# =============================================================================
# PERIODS
# =============================================================================

@dataclass(frozen=True)
class MainPeriod:
    start_year: int
    num_years: int


@dataclass(frozen=True)
class YearPeriod:
    year: int


@dataclass(frozen=True)
class MonthPeriod:
    year: int
    month: int

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)


@dataclass(frozen=True)
class WeekPeriod:
    year: int
    week: int

    @property
    def monday(self) -> date:
        return date.fromisocalendar(self.year, self.week, 1)


@dataclass(frozen=True)
class DayPeriod:
    day: date


Period = Union[MainPeriod, YearPeriod, MonthPeriod, WeekPeriod, DayPeriod]


def titles_for(kind: PageKind, period: Period) -> Tuple[str, str]:
    """Return ``(full_title, grid_label)`` for a page of the given kind."""
    if kind is PageKind.MAIN:
        return "Planner", "Planner"
    if kind is PageKind.YEAR:
        return f"{period.year:04d}", f"{period.year:04d}"
    if kind is PageKind.MONTH:
        first = period.first_day
        return date_to_string(first, " %b %Y "), date_to_string(first, "%b")
    if kind is PageKind.WEEK:
        monday = period.monday
        return date_to_string(monday, "Week %V %G"), date_to_string(monday, "W%V")
    if kind is PageKind.DAY:
        return date_to_string(period.day, "%B %d %Y"), date_to_string(period.day, "%d")
    raise ValueError(f"Unknown page kind: {kind!r}")


# =============================================================================
# GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class Geometry:
    page_width: float
    page_height: float
    margin_width: float
    notes_fraction: float
    left_handed: bool = False
    portrait: bool = False

    @property
    def margin_left(self) -> float:
        return self.margin_width

    @property
    def margin_right(self) -> float:
        return self.page_width - self.margin_width

    @property
    def margin_x(self) -> float:
        """x position of the binding margin line."""
        return self.margin_right if self.left_handed else self.margin_left

    @property
    def notes_width(self) -> float:
        return self.page_width * self.notes_fraction

    def notes_span(self) -> Tuple[float, float]:
        """Horizontal extent of the notes section."""
        if self.left_handed:
            return self.page_width - self.notes_width, self.page_width
        return 0, self.notes_width

    def content_span(self) -> Tuple[float, float]:
        """Horizontal extent of the area left over beside the notes."""
        if self.left_handed:
            return 0, self.page_width - self.notes_width
        return self.notes_width, self.page_width


# =============================================================================
# NODES
# =============================================================================

@dataclass
class PageNode:
    handle: NodeId
    kind: PageKind
    period: Period
    full_title: str
    grid_label: str
    geometry: Geometry
    parent: Optional[NodeId] = None
    left: Optional[NodeId] = None
    right: Optional[NodeId] = None
    children: List[NodeId] = field(default_factory=list)
    surface: Any = None
    state: BuildState = BuildState.UNBUILT

    def __repr__(self) -> str:
        return f"PageNode({self.handle}, {self.kind.name}, {self.full_title.strip()!r})"

    def target_surface(self) -> Any:
        """Surface to link to; the node must have been surfaced already."""
        if self.state < BuildState.SURFACED or self.surface is None:
            raise BuildOrderError(f"Link target {self!r} is {self.state.name}, not surfaced")
        return self.surface


class PageArena:
    """Owner of every node in a planner document."""

    def __init__(self):
        self._nodes: List[PageNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[PageNode]:
        return iter(self._nodes)

    def __getitem__(self, handle: NodeId) -> PageNode:
        return self._nodes[handle]

    def add(self, kind: PageKind, period: Period, geometry: Geometry,
            parent: Optional[NodeId] = None) -> PageNode:
        full_title, grid_label = titles_for(kind, period)
        node = PageNode(handle=len(self._nodes), kind=kind, period=period,
                        full_title=full_title, grid_label=grid_label,
                        geometry=geometry, parent=parent)
        self._nodes.append(node)
        if parent is not None:
            self._nodes[parent].children.append(node.handle)
        return node

    def parent_of(self, node: PageNode) -> Optional[PageNode]:
        return None if node.parent is None else self._nodes[node.parent]

    def left_of(self, node: PageNode) -> Optional[PageNode]:
        return None if node.left is None else self._nodes[node.left]

    def right_of(self, node: PageNode) -> Optional[PageNode]:
        return None if node.right is None else self._nodes[node.right]

    def children_of(self, node: PageNode) -> List[PageNode]:
        return [self._nodes[h] for h in node.children]

    def nodes_of_kind(self, kind: PageKind) -> List[PageNode]:
        return [node for node in self._nodes if node.kind is kind]

    def link_siblings(self, left: PageNode, right: PageNode):
        left.right = right.handle
        right.left = left.handle

    def chain(self, kind: PageKind) -> List[PageNode]:
        """Walk the sibling chain of ``kind`` from its head to its tail."""
        heads = [node for node in self.nodes_of_kind(kind) if node.left is None]
        if not heads:
            return []
        if len(heads) > 1:
            raise ValueError(f"{kind.name} chain has {len(heads)} heads")
        result = []
        seen = set()
        node = heads[0]
        while node is not None:
            if node.handle in seen:
                raise ValueError(f"{kind.name} chain has a cycle at {node!r}")
            seen.add(node.handle)
            result.append(node)
            node = self.right_of(node)
        return result

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def advance(self, node: PageNode, state: BuildState):
        if state != node.state + 1:
            raise BuildOrderError(
                f"{node!r} cannot move from {node.state.name} to {state.name}")
        node.state = state

    def attach_surface(self, node: PageNode, surface: Any):
        if node.surface is not None:
            raise BuildOrderError(f"{node!r} already has a surface")
        if node.state is not BuildState.LINKED:
            raise BuildOrderError(f"{node!r} must be LINKED to be surfaced, is {node.state.name}")
        node.surface = surface
        self.advance(node, BuildState.SURFACED)

    def counts_by_kind(self) -> Dict[PageKind, int]:
        counts = {kind: 0 for kind in PageKind}
        for node in self._nodes:
            counts[node.kind] += 1
        return counts
