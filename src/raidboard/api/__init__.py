"""API module for raidboard.

API layer:
- Validates inputs, resolves candidates by identity
- Returns card payloads for UI
- Forbidden: aggregation or formatting logic of its own
"""
