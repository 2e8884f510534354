"""Creator discovery test suite."""
