"""Small, self-contained design-pattern implementations."""
