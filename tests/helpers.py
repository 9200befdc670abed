import random
from typing import Any, Hashable, Set

def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")

def reachable(g: "Any", start: Hashable) -> Set[Hashable]:
    """Directed closure from ``start``, computed from the public edge list."""
    succ: dict = {}
    for u, v, _ in g.edges():
        succ.setdefault(u, []).append(v)
    out = {start}
    frontier = [start]
    while frontier:
        u = frontier.pop()
        for v in succ.get(u, ()):
            if v not in out:
                out.add(v)
                frontier.append(v)
    return out

def random_graph(seed: int, n: int = 12, m: int = 20) -> "Any":
    from adjgraph import Graph  # local import, conftest sets sys.path first

    rng = random.Random(seed)
    g = Graph[int, int, None]()
    for i in range(n):
        if rng.random() < 0.7:
            g.push_vid(i)
    for k in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        if rng.random() < 0.5:
            g.push_undirected_edge(u, v, k)
        else:
            g.push_edge(u, v, k)
    return g
