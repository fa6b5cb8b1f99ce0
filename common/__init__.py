"""Helpers shared by the client library and its scripts (secrets, logging)."""
