"""
Load Layer - Data Persistence

This layer handles writing collected tables to disk and reading them back.
- Local JSON storage
- No business logic, just I/O operations
"""
