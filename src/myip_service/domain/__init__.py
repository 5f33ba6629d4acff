"""Domain layer for the client info service."""
