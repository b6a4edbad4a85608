"""Pinboard member search service."""
