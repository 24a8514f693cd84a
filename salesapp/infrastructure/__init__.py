"""
Infrastructure Layer
====================

Concrete persistence implementations of the domain repository interfaces.

Contains:
- db: MongoDB repositories (pymongo)
- memory: In-process repositories (STORAGE_BACKEND=memory, tests)
- seed: Sample data inserted on startup
"""
