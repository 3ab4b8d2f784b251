"""Console output for Periodlog."""
