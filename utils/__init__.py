"""Project-wide helpers (logging, root generator construction)."""
