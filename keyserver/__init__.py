"""Validation, request-context and error helpers for a key server web service."""
