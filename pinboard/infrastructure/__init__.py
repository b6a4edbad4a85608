"""Infrastructure: persistence, cache and analytics sink implementations."""
