"""
Auth Service - Relays credentials and bearer tokens to Supabase Auth.

No user data is stored here; every call is forwarded to the identity
provider and its answer is reshaped for the app.
"""
from typing import Any, Dict, Optional

from supabase import Client, create_client

from pomorise.core.config import Settings
from pomorise.core.exceptions import AuthenticationError
from pomorise.core.logging_config import get_logger

logger = get_logger(__name__)


class AuthProviderError(AuthenticationError):
    """The identity provider rejected the request."""

    def __init__(self, message: str):
        super().__init__(message)


def _to_dict(obj: Any) -> Optional[Dict[str, Any]]:
    """Convert a provider model (pydantic) into plain JSON data."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return dict(obj)


def _provider_message(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc) or exc.__class__.__name__


class AuthService:
    """
    Wrapper around the Supabase auth client.

    Example:
        >>> auth = AuthService(settings)
        >>> session = auth.sign_in("me@example.com", "secret123")
        >>> session["token"]
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        self.client = client or create_client(settings.supabase_url, settings.supabase_anon_key)
        logger.info("AuthService initialized")

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for an access token.

        Returns:
            {"token": str, "user": dict}

        Raises:
            AuthProviderError: If the provider rejects the credentials
        """
        try:
            result = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"Sign-in rejected: {_provider_message(e)}")
            raise AuthProviderError(_provider_message(e)) from e

        if result.session is None:
            raise AuthProviderError("No session returned")

        return {
            "token": result.session.access_token,
            "user": _to_dict(result.user),
        }

    def sign_up(self, email: str, password: str, name: str) -> Dict[str, Any]:
        """
        Register a new account. The name is stored as user metadata.

        No token is returned until the email address is verified.
        """
        try:
            result = self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"name": name}},
            })
        except Exception as e:
            logger.warning(f"Sign-up rejected: {_provider_message(e)}")
            raise AuthProviderError(_provider_message(e)) from e

        return {"user": _to_dict(result.user)}

    def logout(self, token: str) -> None:
        """Revoke the session behind a bearer token."""
        try:
            self.client.auth.admin.sign_out(token)
        except Exception as e:
            logger.warning(f"Logout rejected: {_provider_message(e)}")
            raise AuthProviderError(_provider_message(e)) from e

    def get_user(self, token: str) -> Dict[str, Any]:
        """
        Resolve the user owning a bearer token.

        Raises:
            AuthenticationError: If the token is rejected
        """
        try:
            result = self.client.auth.get_user(token)
        except Exception as e:
            logger.debug(f"Token rejected: {_provider_message(e)}")
            raise AuthenticationError("Invalid token") from e

        user = _to_dict(result.user) if result is not None else None
        if not user:
            raise AuthenticationError("Invalid token")
        return user
