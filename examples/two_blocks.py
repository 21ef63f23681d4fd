"""Example pipeline: detected segments of two city blocks to a road graph."""

from roadgraph import PipelineOptions, build_road_graph, extract_graph

SEGMENTS = [
    [[0, 0, 40, 0]],
    [[40, 0, 40, 100]],
    [[40, 100, 0, 100]],
    [[0, 100, 0, 0]],
    [[60, 0, 100, 0]],
    [[100, 0, 100, 100]],
    [[100, 100, 60, 100]],
    [[60, 100, 60, 0]],
    # repeated detection of the first block's bottom edge
    [[1, 1, 39, 1]],
]


def main() -> None:
    options = PipelineOptions(num_x=5)
    graph = extract_graph(SEGMENTS, options)
    print("Merged nodes:", len(graph.nodes_list))
    print("Edges:", graph.lines)

    road = build_road_graph(graph, options)
    print("Road nodes:")
    for idx, node in enumerate(road.nodes):
        print(f"  {idx}: ({node.x:.2f}, {node.y:.2f})")
    print("Road lines:", road.lines)


if __name__ == "__main__":
    main()
