"""Data types and helpers for areas and entities."""
