"""Core room primitives (geometry, boundary parsing, event records, text summaries).

Free of any host or rendering concerns so it can be reused by sessions, loaders, and tests.
"""
