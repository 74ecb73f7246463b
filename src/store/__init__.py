"""Export layer.

This package serializes computed bar ranges for renderers
and terminal output.
"""
