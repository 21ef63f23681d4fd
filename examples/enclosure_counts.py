"""Example: how many quadrilaterals enclose a point in a ring-shaped block."""

from roadgraph import ContainmentOracle, gen_nodes, segments_to_graph

SEGMENTS = [
    (0, 0, 100, 0),
    (100, 0, 100, 100),
    (100, 100, 0, 100),
    (0, 100, 0, 0),
    (30, 30, 70, 30),
    (70, 30, 70, 70),
    (70, 70, 30, 70),
    (30, 70, 30, 30),
]


def main() -> None:
    nodes, edges = segments_to_graph(SEGMENTS, distance_threshold=10)
    oracle = ContainmentOracle(nodes, edges)
    print("Quadrilaterals:", oracle.polygons)

    for node in gen_nodes(nodes, 5):
        count = oracle.containing_count(node)
        print(f"({node.x:6.2f}, {node.y:6.2f}) inside {count} quadrilateral(s)")


if __name__ == "__main__":
    main()
