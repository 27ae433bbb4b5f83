"""accessledger - role ledger and access-decision engine."""

__version__ = "0.1.0"
