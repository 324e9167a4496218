"""Entry content parsing."""
