"""
Integration tests: HTTP API and CLI end to end over the in-memory database.
"""
