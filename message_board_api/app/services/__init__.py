"""Service layer: the in-memory message store."""
