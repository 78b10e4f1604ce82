"""Course storage layer.

This package holds the keyed in-memory course table and the catalog
SDK that tracks whether a course file has been loaded.
"""
