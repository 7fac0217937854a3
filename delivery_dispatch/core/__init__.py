"""Core package - shared domain errors."""
