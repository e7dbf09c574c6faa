"""
WorkCatalog - Portfolio case study catalogue.

A static, immutable catalogue of client projects with responsive image
descriptors and read-only query helpers for page-rendering consumers.
"""

__version__ = "0.1.0"
