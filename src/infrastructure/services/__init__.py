"""Infrastructure Services.

Concrete implementations of the domain's collaborator interfaces. These
services handle technical concerns and external integrations.

- Credential issuance: HTTP client for the upstream credential issuer
- Access guarding: JWT verification of access credentials
"""

from .access_guard import JwtAccessGuard
from .credential_issuer_client import HttpCredentialIssuer

__all__ = [
    "HttpCredentialIssuer",
    "JwtAccessGuard",
]
