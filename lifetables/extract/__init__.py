"""
Extract Layer - Pure I/O to the SSA site

This layer handles fetching pages and locating their data table.
- No imports from transformation or load layers
- Throttled, fail-fast HTTP (no retries)
- Returns raw text and cell strings
"""
