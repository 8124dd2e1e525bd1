"""Share module.

- Serializes the current party to text and hands it to a clipboard
- Owns the transient copied indicator and its revert timer
- Forbidden: selection mutation
"""
