"""Shared utilities: telemetry, request context and cross-cutting helpers.

Used by application, infrastructure and api layers. No business logic.
"""
