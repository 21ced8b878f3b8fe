"""Domain layer - pattern implementations and the organization directory."""
