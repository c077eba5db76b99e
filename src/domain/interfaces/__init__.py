"""Domain Interfaces for dependency inversion.

These interfaces define contracts that infrastructure adapters must implement,
keeping the route handlers independent of how credentials are minted or
verified.

- Credential issuance: login, registration, refresh, logout, Google OAuth
- Access guarding: request-time validation of access credentials
"""

from .services import IAccessGuard, ICredentialIssuer

__all__ = [
    "IAccessGuard",
    "ICredentialIssuer",
]
