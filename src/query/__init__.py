"""Read-only course queries."""
