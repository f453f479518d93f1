"""
Test Suite for birdwalk.

This package contains tests for all modules:
- test_sampling.py: Alias sampler construction and draws
- test_walker.py: Walker construction, seeds, hops and chaining
- test_data.py: Table loading, synthetic graphs and statistics
- test_integration.py: Configuration, end-to-end walks and scripts
"""
