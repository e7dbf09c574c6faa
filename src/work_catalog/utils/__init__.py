"""Shared utilities for WorkCatalog."""
