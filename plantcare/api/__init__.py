"""HTTP API for the plant care backend."""
