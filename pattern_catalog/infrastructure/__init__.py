"""Infrastructure layer - technical concerns shared by the catalogue."""
