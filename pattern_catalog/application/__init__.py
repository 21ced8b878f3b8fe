"""Application layer - example registry, runner and catalogue."""
