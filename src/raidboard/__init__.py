"""Raid party selection, live party statistics and share text."""
