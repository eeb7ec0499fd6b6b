"""Typed models for the Assets API, resource state, schemas and diagnostics."""
