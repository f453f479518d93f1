#!/usr/bin/env python3
"""
Recommendation Script.

This script runs one query through the graph walker:
1. Loads configuration
2. Loads or creates the interaction tables
3. Builds the walker
4. Walks from the query items and prints the most visited items

Usage:
    python scripts/recommend.py --items 3 17 42
    python scripts/recommend.py --config config/default.yaml --items 3:2.0 17 --depth 2
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import load_settings
from birdwalk import GraphWalker, QueryItem, BirdwalkError
from birdwalk.data import interactions_from_config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Recommend items by random walks')

    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to configuration file (default: config/default.yaml)'
    )
    parser.add_argument(
        '--data-path', type=str, default=None,
        help='Path to interaction tables (JSON), overrides the config'
    )
    parser.add_argument(
        '--items', type=str, nargs='+', required=True,
        help='Query items, as ITEM or ITEM:WEIGHT'
    )
    parser.add_argument(
        '--depth', type=int, default=None,
        help='Hops per walk chain, overrides the config'
    )
    parser.add_argument(
        '--draws', type=int, default=None,
        help='Walk chains per query, overrides the config'
    )
    parser.add_argument(
        '--top', type=int, default=10,
        help='Number of recommendations to print'
    )
    parser.add_argument(
        '--exclude-query', action='store_true',
        help='Do not recommend the query items themselves'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed, overrides the config'
    )

    return parser.parse_args(argv)


def parse_query(tokens):
    """Turn ITEM or ITEM:WEIGHT tokens into query items."""
    query = []
    for token in tokens:
        item, _, weight = token.partition(':')
        query.append(QueryItem(item=int(item), weight=float(weight) if weight else 1.0))
    return query


def main(argv=None):
    """Main recommendation function."""
    args = parse_args(argv)

    print("=" * 60)
    print("Random Walk Recommendations")
    print("=" * 60)

    try:
        settings = load_settings(
            args.config,
            walker_overrides={'depth': args.depth, 'draws': args.draws, 'seed': args.seed},
            data_path=args.data_path
        )
    except BirdwalkError as e:
        print(f"  Error: {e}")
        return 1

    # Step 1: Load or create tables
    print("\n[1/3] Loading interaction tables...")
    start_time = time.time()
    data = interactions_from_config(settings.data)
    print(f"  Users: {data.num_users}")
    print(f"  Items: {data.num_items}")
    print(f"  Done in {time.time() - start_time:.2f}s")

    # Step 2: Build walker
    print("\n[2/3] Building walker...")
    start_time = time.time()
    try:
        walker = GraphWalker(settings.walker, data.item_weights, data.users_to_items)
    except BirdwalkError as e:
        print(f"  Error: {e}")
        return 1
    print(f"  {walker}")
    print(f"  Done in {time.time() - start_time:.2f}s")

    # Step 3: Walk
    print("\n[3/3] Walking from query...")
    start_time = time.time()
    try:
        recommendations = walker.recommend(
            parse_query(args.items),
            n=args.top,
            exclude_query=args.exclude_query
        )
    except BirdwalkError as e:
        print(f"  Error: {e}")
        return 1
    print(f"  Done in {time.time() - start_time:.4f}s")

    print("\nRecommendations:")
    for rank, (item, visits) in enumerate(recommendations, 1):
        print(f"  {rank:>3}. item {item:<8} visits: {visits}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
