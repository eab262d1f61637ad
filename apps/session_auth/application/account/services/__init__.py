"""Account services."""

from apps.session_auth.application.account.services.credential_verifier import (
    CredentialVerifier,
)

__all__ = ["CredentialVerifier"]
