"""Read-side queries."""
