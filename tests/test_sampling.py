"""
Tests for Sampling Module.

Tests alias table construction, draw counts and distribution fidelity.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from birdwalk.sampling import AliasSampler
from birdwalk.errors import EmptyDistributionError, InvalidWeightError, BirdwalkError

# Chi-square critical value for 3 degrees of freedom at p = 0.001
CHI2_CRITICAL_DF3 = 16.266


class TestAliasSamplerConstruction:
    """Tests for input validation and table construction."""

    def test_empty_weights_rejected(self):
        """Test that an empty distribution is refused."""
        with pytest.raises(EmptyDistributionError):
            AliasSampler([])

    def test_negative_weight_rejected(self):
        """Test that negative weights are refused."""
        with pytest.raises(InvalidWeightError):
            AliasSampler([-1.0, 2.0])

    def test_all_zero_weights_rejected(self):
        """Test that weights summing to zero are refused."""
        with pytest.raises(InvalidWeightError):
            AliasSampler([0.0, 0.0, 0.0])

    @pytest.mark.parametrize('bad', [np.nan, np.inf, -np.inf])
    def test_non_finite_weight_rejected(self, bad):
        """Test that NaN and infinite weights are refused."""
        with pytest.raises(InvalidWeightError):
            AliasSampler([1.0, bad])

    def test_huge_finite_weights_accepted(self):
        """Test that finite weights whose sum overflows are still sampled."""
        sampler = AliasSampler([1e308, 1e308, 5e307])

        np.testing.assert_allclose(sampler.probabilities, [0.4, 0.4, 0.2])
        assert np.all(np.isfinite(sampler.prob_table))

    def test_zero_sum_message(self):
        """Test that only all-zero weights are reported as summing to zero."""
        with pytest.raises(InvalidWeightError, match='sum to zero'):
            AliasSampler([0.0, 0.0])

    def test_errors_share_base_class(self):
        """Test that sampler errors are BirdwalkErrors and ValueErrors."""
        with pytest.raises(BirdwalkError):
            AliasSampler([])
        with pytest.raises(ValueError):
            AliasSampler([0.0])

    def test_probabilities_normalized(self):
        """Test that stored probabilities sum to one."""
        sampler = AliasSampler([1.0, 3.0])

        assert len(sampler) == 2
        np.testing.assert_allclose(sampler.probabilities, [0.25, 0.75])

    def test_tables_reconstruct_distribution(self):
        """Test that the tables encode exactly the input distribution."""
        weights = np.array([5.0, 1.0, 0.0, 2.0, 2.0])
        sampler = AliasSampler(weights)
        n = len(weights)

        # Mass of each outcome = own threshold + mass routed via aliases
        mass = sampler.prob_table / n
        np.add.at(mass, sampler.alias, (1.0 - sampler.prob_table) / n)

        np.testing.assert_allclose(mass, weights / weights.sum(), atol=1e-12)

    def test_tables_are_read_only(self):
        """Test that the sampler cannot be mutated after construction."""
        sampler = AliasSampler([1.0, 2.0])

        with pytest.raises(ValueError):
            sampler.prob_table[0] = 0.5


class TestAliasSamplerDraws:
    """Tests for sampling."""

    @pytest.fixture
    def rng(self):
        """Create seeded generator."""
        return np.random.default_rng(0)

    @pytest.mark.parametrize('k', [1, 2, 17, 1000])
    def test_exact_draw_count(self, rng, k):
        """Test that sample(k) returns exactly k valid indices."""
        sampler = AliasSampler([0.2, 0.3, 0.5])
        draws = sampler.sample(k, rng)

        assert draws.shape == (k,)
        assert draws.min() >= 0
        assert draws.max() < 3

    def test_invalid_draw_count(self, rng):
        """Test that a non-positive number of draws is refused."""
        sampler = AliasSampler([1.0])

        with pytest.raises(ValueError):
            sampler.sample(0, rng)

    def test_single_outcome(self, rng):
        """Test that a single outcome is always drawn."""
        sampler = AliasSampler([5.0])

        assert set(sampler.sample(100, rng).tolist()) == {0}

    def test_zero_weight_never_drawn(self, rng):
        """Test that zero-weight outcomes never come out."""
        sampler = AliasSampler([0.0, 1.0, 0.0, 2.0])
        draws = sampler.sample(10000, rng)

        assert set(draws.tolist()) <= {1, 3}

    def test_sample_one(self, rng):
        """Test single draw helper."""
        sampler = AliasSampler([1.0, 1.0])
        value = sampler.sample_one(rng)

        assert isinstance(value, int)
        assert value in (0, 1)

    def test_distribution_fidelity(self, rng):
        """Test empirical frequencies against the weights (chi-square)."""
        weights = np.array([1.0, 2.0, 3.0, 4.0])
        num_samples = 100000
        sampler = AliasSampler(weights)

        counts = np.bincount(sampler.sample(num_samples, rng), minlength=len(weights))
        expected = num_samples * weights / weights.sum()
        chi2 = float(((counts - expected) ** 2 / expected).sum())

        assert chi2 < CHI2_CRITICAL_DF3

    def test_same_seed_same_draws(self):
        """Test that draws only depend on the generator state."""
        sampler = AliasSampler([3.0, 1.0, 4.0, 1.0, 5.0])

        first = sampler.sample(50, np.random.default_rng(7))
        second = sampler.sample(50, np.random.default_rng(7))

        np.testing.assert_array_equal(first, second)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
