"""Command line scripts for birdwalk."""
