"""Browsing helpers and entry loading."""
