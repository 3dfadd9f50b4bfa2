"""Adapters shared by every bounded context."""
