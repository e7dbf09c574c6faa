"""Command-line interface for WorkCatalog."""
