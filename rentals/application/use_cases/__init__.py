"""Use cases: person and role membership workflows."""
