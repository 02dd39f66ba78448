"""Application layer: ports, persisted state and services."""
