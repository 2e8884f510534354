"""Creator discovery API package."""
