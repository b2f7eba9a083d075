"""Walking use cases."""
