"""
Core Utilities - Shared plumbing

Configuration, logging, HTTP session, rate limiting and the error taxonomy.
"""
