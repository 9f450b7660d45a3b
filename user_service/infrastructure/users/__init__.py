"""Adapters for the users bounded context."""
