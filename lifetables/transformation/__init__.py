"""
Transformation Layer - Pure, Deterministic Functions

This layer turns table rows into validated survivorship tables.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
