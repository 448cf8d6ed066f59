"""Synchronization engine: resolver, upsert, import/export pipelines."""
