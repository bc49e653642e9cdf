"""Shared infrastructure: errors, logging, timeouts, HTTP pool, fallback chains."""
