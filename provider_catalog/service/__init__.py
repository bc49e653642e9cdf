"""Service layer: command-line entrypoints over the catalog pipeline."""
