"""Pattern Catalog - Root Package.

An educational catalogue of classic object-oriented design patterns, each one
a small self-contained example that prints illustrative output.

Key Components:
    - domain: pattern implementations and the organization directory
    - application: example registry, runner and the catalogue of examples
    - config: typed configuration schemas and loading
    - infrastructure: logging
    - cli: command-line entry point

Usage:
    pattern-catalog list
    pattern-catalog run "Simple Factory"
    pattern-catalog run --all
"""

from ._version import __version__

PACKAGE_NAME = "pattern-catalog"

__all__ = ["__version__", "PACKAGE_NAME"]
