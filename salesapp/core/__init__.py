"""Core configuration (settings and logging)."""
