"""
Tests for Data Module.

Tests interaction table loading, synthetic graph generation and graph
statistics.
"""

import json
import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from birdwalk.data import (
    InteractionData,
    load_interactions,
    create_mock_interactions,
    interactions_from_config,
)
from birdwalk.utils import compute_degree_distribution, compute_graph_statistics


class TestMockInteractions:
    """Tests for synthetic graph generation."""

    @pytest.fixture
    def data(self):
        """Create small synthetic graph."""
        return create_mock_interactions(num_users=100, num_items=30, seed=42)

    def test_shapes(self, data):
        """Test table sizes."""
        assert data.num_users == 100
        assert data.num_items == 30

    def test_every_user_has_items(self, data):
        """Test that no user collection is empty."""
        assert all(len(items) >= 1 for items in data.users_to_items)

    def test_items_in_range(self, data):
        """Test that all referenced items have a weight."""
        for items in data.users_to_items:
            assert all(0 <= i < data.num_items for i in items)

    def test_weights_are_interaction_counts(self, data):
        """Test that item weights count interactions."""
        counts = np.zeros(data.num_items)
        for items in data.users_to_items:
            for item in items:
                counts[item] += 1

        np.testing.assert_array_equal(counts, data.item_weights)

    def test_reproducible(self):
        """Test that the same seed gives the same graph."""
        first = create_mock_interactions(num_users=20, num_items=10, seed=7)
        second = create_mock_interactions(num_users=20, num_items=10, seed=7)

        assert first == second


class TestLoadInteractions:
    """Tests for JSON loading."""

    def test_save_and_load(self, tmp_path):
        """Test that saved tables load back unchanged."""
        data = InteractionData(item_weights=[1.0, 2.5, 0.0], users_to_items=[[0, 1], [1], []])
        path = tmp_path / 'nested' / 'tables.json'
        data.save(str(path))

        assert load_interactions(str(path)) == data

    def test_missing_keys(self, tmp_path):
        """Test that incomplete files are refused."""
        path = tmp_path / 'tables.json'
        path.write_text(json.dumps({'item_weights': [1.0]}))

        with pytest.raises(ValueError, match='users_to_items'):
            load_interactions(str(path))

    def test_from_config_path(self, tmp_path):
        """Test that a configured path is loaded."""
        path = tmp_path / 'tables.json'
        InteractionData([1.0, 1.0], [[0, 1]]).save(str(path))

        data = interactions_from_config({'path': str(path), 'num_users': 999})

        assert data.num_users == 1

    def test_from_config_mock(self):
        """Test that a synthetic graph is created without a path."""
        data = interactions_from_config({'path': None, 'num_users': 12, 'num_items': 5, 'seed': 1})

        assert data.num_users == 12
        assert data.num_items == 5


class TestGraphStatistics:
    """Tests for graph statistics."""

    def test_degree_distribution(self):
        """Test degree statistics of one side of the graph."""
        stats = compute_degree_distribution([[0, 1], [], [2, 2, 3]])

        assert stats['min'] == 0
        assert stats['max'] == 3
        assert stats['isolated_nodes'] == 1
        assert stats['histogram'] == {0: 1, 2: 1, 3: 1}

    def test_empty_distribution(self):
        """Test statistics of an empty side."""
        stats = compute_degree_distribution([])

        assert stats['mean'] == 0.0
        assert stats['histogram'] == {}

    def test_graph_statistics(self):
        """Test bipartite graph statistics."""
        stats = compute_graph_statistics([[0, 1], [1]], [[0], [0, 1], []])

        assert stats['num_users'] == 2
        assert stats['num_items'] == 3
        assert stats['num_edges'] == 3
        assert stats['density'] == pytest.approx(0.5)
        assert stats['items_without_users'] == 1


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
