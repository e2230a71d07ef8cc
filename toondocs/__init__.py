"""toondocs - validate TOON content and generated docs in a documentation tree."""

__version__ = "1.0.0"
