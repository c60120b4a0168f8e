"""Persistence layer: database handle, ORM models, repositories."""
