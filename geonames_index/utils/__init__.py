"""Caller-side helpers that sit on top of search results."""
