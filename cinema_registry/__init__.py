"""In-memory cinema registry: catalog, seat booking engine and booking ledger."""

__version__ = "1.0.0"
