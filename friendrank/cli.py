import argparse
import logging

from .config import PageRankConfig
from .edgelist import load_edge_list, write_scores
from .errors import PageRankError
from .graph import Graph
from .recommend import recommend
from .solver import compute_pagerank


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="friendrank", description="PageRank over an undirected edge list")
    parser.add_argument("edges", help="Edge list file, one 'u v' pair per line")
    parser.add_argument("--delimiter", default=None, help="Field delimiter (default: whitespace; use ',' for CSV)")
    parser.add_argument("--damping", type=float, default=0.85, help="Damping factor (default: 0.85)")
    parser.add_argument("--max-iter", type=int, default=50, help="Maximum iterations (default: 50)")
    parser.add_argument("--tol", type=float, default=1e-6, help="Convergence tolerance for L1 delta (default: 1e-6)")
    parser.add_argument("--top-k", type=int, default=20, help="Number of top nodes to print (default: 20)")
    parser.add_argument("--recommend", type=int, default=None, metavar="NODE", help="Print friend recommendations for NODE")
    parser.add_argument("--recommend-k", type=int, default=3, help="Number of recommendations (default: 3)")
    parser.add_argument("--output", default=None, help="Write every node's score to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-iteration progress")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = PageRankConfig(damping_factor=args.damping, max_iterations=args.max_iter, tolerance=args.tol).validate()
        edges, nodes = load_edge_list(args.edges, delimiter=args.delimiter)
        print(f"Loaded edges: {len(edges):,}, unique nodes: {len(nodes):,}")
        graph = Graph.from_edges(edges)
        result = compute_pagerank(graph, config=config)
        recommendations = recommend(graph, result, args.recommend, k=args.recommend_k) if args.recommend is not None else None
    except (PageRankError, OSError) as exc:
        raise SystemExit(f"friendrank: {exc}")

    status = "converged" if result.converged else "did not converge"
    print(f"PageRank {status} after {result.iterations} iterations (L1 diff {result.delta:.2e})")

    print(f"\nTop {args.top_k} nodes by PageRank:")
    for node, score in result.top(args.top_k):
        print(f"node={node}, rank={score:.6e}")

    if recommendations is not None:
        print(f"\nRecommended new friends for node {args.recommend}:")
        if not recommendations:
            print("  none")
        for rec in recommendations:
            print(f"  node={rec.node}, rank={rec.score:.6e}")

    if args.output:
        write_scores(args.output, result)
        print(f"Saved pagerank scores to {args.output}")


if __name__ == "__main__":
    main()
