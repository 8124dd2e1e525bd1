"""Aggregation module for party summaries.

- Turns selected candidates into average power and role counts
- Forbidden: selection mutation, formatting, clipboard access
"""
