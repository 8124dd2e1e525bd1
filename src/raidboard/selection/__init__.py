"""Selection state and candidate visibility for a raid card.

- Owns the per-slot selection vector and expand/collapse flags
- Forbidden: aggregation, formatting, clipboard access
"""
