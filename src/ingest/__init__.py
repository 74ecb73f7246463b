"""Entry ingestion layer.

This package reads raw waterfall entry files and validates them
into immutable records for the range transform.
"""
