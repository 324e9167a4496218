"""HTML rendering of the journal."""
