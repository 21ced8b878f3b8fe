"""Version information for the Pattern Catalog package."""

__version__ = "1.0.0"
