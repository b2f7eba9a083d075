"""Types and ports shared across domains."""
