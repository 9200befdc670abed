"""Print BFS and DFS orderings of the example graph."""

import argparse
import logging
import sys
from typing import List

from adjgraph import create_example_graph, format_sequence


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Traverse the built-in five-vertex example graph from A and print both orderings.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    g = create_example_graph()
    print(format_sequence("Breadth First Search", g.bfs("A")))
    print(format_sequence("Depth First Search", g.dfs("A")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
