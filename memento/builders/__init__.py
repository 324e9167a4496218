"""Builders for calendar grids, activity levels and entry views."""
