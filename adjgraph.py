# adjgraph.py


from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, Type, TypeVar
import copy
import logging
import re

logger = logging.getLogger(__name__)

Vid = TypeVar("Vid", bound=Hashable)
E = TypeVar("E")
V = TypeVar("V")

_ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_CTRL_RE = re.compile(r"[\x00-\x1f\x7f]")  # non-printable/control chars

def _safe_str(x: object, max_len: int = 120) -> str:
    """
    Printable form of an identifier:
    - uses str() then strips ANSI escapes and control chars
    - truncates long values
    """
    s = str(x)
    s = _ANSI_RE.sub("", s)
    s = _CTRL_RE.sub("", s)
    if len(s) > max_len:
        s = s[: max_len - 1] + "…"
    return s

def format_sequence(title: str, items: Iterable[object]) -> str:
    """Render ``items`` as ``"<title>: [a, b, c]"``."""
    return f"{title}: [" + ", ".join(_safe_str(x) for x in items) + "]"

class Graph(Generic[Vid, E, V]):
    """
    Adjacency-list graph, generic over identifier, edge label and vertex payload:
    - vertex payloads and adjacency lists live in two independent dicts
    - edges may point at identifiers that were never registered as vertices
    - adjacency lists keep insertion order (traversal tie-break order)
    - parallel edges and self-loops are kept as pushed
    """

    def __init__(
        self,
        *,
        # Optional hard type restriction on identifiers (e.g. only str)
        restrict_vertex_types: Optional[Tuple[Type, ...]] = None,
    ):
        self._vertices: Dict[Vid, V] = {}
        self._adjacency: Dict[Vid, List[Tuple[Vid, E]]] = {}
        self._restrict_vertex_types = restrict_vertex_types

    # ---------- internal helpers ----------

    def _validate_vertex_type(self, v: Vid) -> None:
        # Hashability is required (bound on Vid at type-check time, gated here at runtime)
        try:
            hash(v)
        except TypeError as e:
            raise TypeError(f"Vertex must be hashable; got {type(v).__name__}") from e

        if self._restrict_vertex_types is not None and not isinstance(v, self._restrict_vertex_types):
            allowed = ", ".join(t.__name__ for t in self._restrict_vertex_types)
            raise TypeError(f"Vertex type {type(v).__name__} not allowed (allowed: {allowed})")

    # ---------- mutation ----------

    def push_vertex(self, vid: Vid, payload: V) -> None:
        """Register ``vid`` with ``payload``, overwriting any previous payload."""
        self._validate_vertex_type(vid)
        self._vertices[vid] = payload

    def push_vid(self, vid: Vid) -> None:
        """Register ``vid`` with no payload."""
        self.push_vertex(vid, None)  # type: ignore[arg-type]

    def push_edge(self, src: Vid, dest: Vid, label: E = None) -> None:  # type: ignore[assignment]
        """
        Append a directed edge ``src -> dest``. Neither endpoint has to be
        registered as a vertex.
        """
        self._validate_vertex_type(src)
        self._validate_vertex_type(dest)
        self._adjacency.setdefault(src, []).append((dest, label))

    def push_undirected_edge(self, src: Vid, dest: Vid, label: E = None) -> None:  # type: ignore[assignment]
        """
        Push ``src -> dest`` and ``dest -> src``. The reverse edge carries its
        own copy of ``label``.
        """
        # validate both ends and copy the label before touching adjacency
        self._validate_vertex_type(src)
        self._validate_vertex_type(dest)
        reverse = copy.deepcopy(label)
        self._adjacency.setdefault(src, []).append((dest, label))
        self._adjacency.setdefault(dest, []).append((src, reverse))

    # ---------- traversal ----------

    def bfs(self, start: Vid) -> List[Vid]:
        """
        Breadth-first order of every identifier reachable from ``start``.

        Neighbours are enqueued in the order their edges were pushed. An
        identifier with no outgoing edges yields ``[start]``.
        """
        self._validate_vertex_type(start)
        queue: Deque[Vid] = deque([start])
        seen: Set[Vid] = {start}
        order: List[Vid] = []

        while queue:
            current = queue.popleft()
            order.append(current)
            for nbr, _ in self._adjacency.get(current, ()):
                if nbr not in seen:
                    seen.add(nbr)
                    queue.append(nbr)

        logger.debug("bfs from %r visited %d vertices", start, len(order))
        return order

    def dfs(self, start: Vid) -> List[Vid]:
        """
        Pre-order depth-first walk from ``start`` using an explicit stack.

        Neighbours are pushed in edge order, so the last-pushed edge of a
        vertex is followed first. The stack may hold an identifier more than
        once; repeats are dropped when popped.
        """
        self._validate_vertex_type(start)
        stack: List[Vid] = [start]
        visited: Set[Vid] = set()
        order: List[Vid] = []

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            for nbr, _ in self._adjacency.get(current, ()):
                if nbr not in visited:
                    stack.append(nbr)

        logger.debug("dfs from %r visited %d vertices", start, len(order))
        return order

    # ---------- queries ----------

    def has_vertex(self, vid: Vid) -> bool:
        return vid in self._vertices

    def vertex(self, vid: Vid) -> V:
        return self._vertices[vid]

    def vertices(self) -> Tuple[Vid, ...]:
        return tuple(self._vertices.keys())

    def neighbours(self, vid: Vid) -> Tuple[Tuple[Vid, E], ...]:
        return tuple(self._adjacency.get(vid, ()))

    def get_adjacent_vertices(self, vid: Vid) -> Tuple[Vid, ...]:
        return tuple(nbr for nbr, _ in self._adjacency.get(vid, ()))

    def has_edge(self, src: Vid, dest: Vid) -> bool:
        return any(nbr == dest for nbr, _ in self._adjacency.get(src, ()))

    def edges(self) -> Tuple[Tuple[Vid, Vid, E], ...]:
        return tuple((u, v, label) for u, nbrs in self._adjacency.items() for v, label in nbrs)

    def out_degree(self, vid: Vid) -> int:
        return len(self._adjacency.get(vid, ()))

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vid: object) -> bool:
        return vid in self._vertices

    def __str__(self) -> str:
        if not self._adjacency:
            return "Graph {\n}"
        lines = []
        for u, nbrs in self._adjacency.items():
            lines.append(f"{_safe_str(u)}: [" + ", ".join(_safe_str(v) for v, _ in nbrs) + "]")
        return "Graph {\n  " + "\n  ".join(lines) + "\n}"


def create_example_graph() -> Graph[str, str, None]:
    """Five vertices A..E joined by undirected edges A-B, A-D, B-C, D-E."""
    g: Graph[str, str, None] = Graph()
    for vid in ("A", "B", "C", "D", "E"):
        g.push_vid(vid)
    for u, v in (("A", "B"), ("A", "D"), ("B", "C"), ("D", "E")):
        g.push_undirected_edge(u, v, f"{u} - {v}")
    return g
