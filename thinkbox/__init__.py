"""Small building blocks: patterns, concurrency helpers, uploads, SQLite and Redis tools."""

__version__ = "0.1.0"