"""Shared helpers (structured logging, line input)."""
