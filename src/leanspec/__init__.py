"""LeanSpec: spec documents with structured metadata and a relationship graph."""
