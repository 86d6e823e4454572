"""DUP Portfolio - stock entry ledger with derived P&L views."""

__version__ = "0.1.0"
