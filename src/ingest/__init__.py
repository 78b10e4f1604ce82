"""Course file ingestion.

This package reads delimited course files and feeds parsed records
into the course table, collecting non-fatal warnings along the way.
"""
