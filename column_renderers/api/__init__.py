"""HTTP API for the column renderer catalog."""
