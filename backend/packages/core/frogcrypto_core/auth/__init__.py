"""
Credential verification.

Provides the verifier interface and the signed-token implementation.
"""

from .credential import (
    CredentialVerifier,
    SignedCredentialVerifier,
    create_feed_credential,
)

__all__ = [
    "CredentialVerifier",
    "SignedCredentialVerifier",
    "create_feed_credential",
]
