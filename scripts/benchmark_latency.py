#!/usr/bin/env python3
"""
Latency Benchmarking Script.

This script benchmarks the graph walker:
- Construction time (adjacency inversion and per-user samplers)
- Query latency
- Latency scaling with the number of draws

Usage:
    python scripts/benchmark_latency.py
    python scripts/benchmark_latency.py --num-users 20000 --num-items 5000
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np

from birdwalk import GraphWalker, QueryItem, WalkerConfig
from birdwalk.data import create_mock_interactions


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Benchmark random walk latency')

    parser.add_argument(
        '--num-users', type=int, default=5000,
        help='Number of users for synthetic graph'
    )
    parser.add_argument(
        '--num-items', type=int, default=1000,
        help='Number of items for synthetic graph'
    )
    parser.add_argument(
        '--depth', type=int, default=2,
        help='Hops per walk chain'
    )
    parser.add_argument(
        '--draws', type=int, default=1000,
        help='Walk chains per query'
    )
    parser.add_argument(
        '--num-iterations', type=int, default=50,
        help='Number of benchmark iterations'
    )
    parser.add_argument(
        '--warmup', type=int, default=5,
        help='Number of warmup iterations'
    )
    parser.add_argument(
        '--seed', type=int, default=42,
        help='Random seed'
    )

    return parser.parse_args(argv)


def benchmark_construction(data, config, num_iterations):
    """Benchmark walker construction."""
    print("\n[1] Walker Construction")
    print("-" * 40)

    times = []
    for _ in range(num_iterations):
        start = time.perf_counter()
        GraphWalker(config, data.item_weights, data.users_to_items)
        times.append(time.perf_counter() - start)

    times_ms = np.array(times) * 1000
    print(f"  Mean: {times_ms.mean():.2f} ms")
    print(f"  Std:  {times_ms.std():.2f} ms")

    return {'construction_mean_ms': float(times_ms.mean())}


def benchmark_query(walker, queries, num_iterations, warmup):
    """Benchmark process() latency."""
    print("\n[2] Query Latency")
    print("-" * 40)

    for query in queries[:warmup]:
        walker.process(query)

    times = []
    for i in range(num_iterations):
        query = queries[i % len(queries)]
        start = time.perf_counter()
        walker.process(query)
        times.append(time.perf_counter() - start)

    times_ms = np.array(times) * 1000
    print(f"  Mean: {times_ms.mean():.2f} ms")
    print(f"  P50:  {np.percentile(times_ms, 50):.2f} ms")
    print(f"  P95:  {np.percentile(times_ms, 95):.2f} ms")
    print(f"  P99:  {np.percentile(times_ms, 99):.2f} ms")

    return {
        'query_mean_ms': float(times_ms.mean()),
        'query_p95_ms': float(np.percentile(times_ms, 95))
    }


def benchmark_scaling(data, depth, queries, seed, num_iterations):
    """Benchmark latency scaling with the number of draws."""
    print("\n[3] Scaling Analysis")
    print("-" * 40)

    results = []
    for draws in [100, 500, 1000, 5000, 10000]:
        walker = GraphWalker(
            WalkerConfig(depth=depth, draws=draws, seed=seed),
            data.item_weights,
            data.users_to_items
        )

        times = []
        for i in range(num_iterations):
            start = time.perf_counter()
            walker.process(queries[i % len(queries)])
            times.append(time.perf_counter() - start)

        mean_ms = float(np.mean(times) * 1000)
        print(f"  draws={draws:<6} mean: {mean_ms:.2f} ms")
        results.append({'draws': draws, 'mean_ms': mean_ms})

    return results


def make_queries(data, num_queries, rng):
    """Build queries from random users' collections."""
    queries = []
    for user in rng.integers(0, data.num_users, size=num_queries):
        items = data.users_to_items[int(user)]
        queries.append([QueryItem(item=item, weight=1.0) for item in items])
    return queries


def main(argv=None):
    """Main benchmark function."""
    args = parse_args(argv)

    print("=" * 60)
    print("Random Walk Latency Benchmark")
    print("=" * 60)

    data = create_mock_interactions(
        num_users=args.num_users,
        num_items=args.num_items,
        seed=args.seed
    )
    config = WalkerConfig(depth=args.depth, draws=args.draws, seed=args.seed)
    print(f"  Users: {data.num_users}, items: {data.num_items}")
    print(f"  Depth: {config.depth}, draws: {config.draws}")

    rng = np.random.default_rng(args.seed)
    queries = make_queries(data, max(args.num_iterations, args.warmup), rng)

    results = {}
    results.update(benchmark_construction(data, config, min(args.num_iterations, 5)))

    walker = GraphWalker(config, data.item_weights, data.users_to_items)
    results.update(benchmark_query(walker, queries, args.num_iterations, args.warmup))
    results['scaling'] = benchmark_scaling(
        data, args.depth, queries, args.seed, min(args.num_iterations, 10)
    )

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"  Construction: {results['construction_mean_ms']:.2f} ms")
    print(f"  Query mean:   {results['query_mean_ms']:.2f} ms")
    print(f"  Query P95:    {results['query_p95_ms']:.2f} ms")

    return results


if __name__ == '__main__':
    main()
