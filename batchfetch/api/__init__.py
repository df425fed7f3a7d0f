"""HTTP API for batch document lookups."""
