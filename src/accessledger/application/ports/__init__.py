"""Application ports - interfaces for external adapters."""

from accessledger.application.ports.access_checker import AccessChecker
from accessledger.application.ports.access_ledger import AccessLedger
from accessledger.application.ports.identity_resolver import IdentityResolver

__all__ = [
    "AccessChecker",
    "AccessLedger",
    "IdentityResolver",
]
