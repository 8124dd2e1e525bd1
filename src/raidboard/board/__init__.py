"""Board module.

- Composes selection, aggregation, visibility and sharing per raid card
- Builds view payloads for the UI
"""
