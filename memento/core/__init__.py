"""Logging, exceptions, paths, validation and shared CLI plumbing."""
