"""Village administration records: residents, finance, budgets, events, assets and public services."""

__version__ = "0.1.0"
