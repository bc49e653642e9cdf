"""Persistence layer: store protocol and the SQLite display-name cache."""
