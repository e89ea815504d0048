"""HTTP API for the pace table."""
