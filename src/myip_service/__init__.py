"""Client connection info and speed-test HTTP service."""
