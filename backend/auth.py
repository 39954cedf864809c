"""
Authentication module wrapping Supabase Auth.

Provides email/password sign-in and sign-up, the signed-in user's identity,
and account deletion. Every failure surfaces as AuthError carrying a message
that can be shown to the user as-is.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from supabase import Client

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
DEFAULT_USERNAME = "User"
EMAIL_REDIRECT_URL = "workoutapp://login"
DELETE_USER_FUNCTION = "delete-user"


class AuthError(Exception):
    """Authentication failed; `message` is user-facing."""

    def __init__(self, message: str, *, email_not_confirmed: bool = False):
        super().__init__(message)
        self.message = message
        self.email_not_confirmed = email_not_confirmed


@dataclass
class SignUpResult:
    """Outcome of a successful sign-up."""

    user_id: Optional[str]
    signed_in: bool

    @property
    def needs_confirmation(self) -> bool:
        """Account created, but the user must confirm their email before signing in."""
        return not self.signed_in


class AuthService:
    """
    Supabase Auth wrapper.

    The client is injected via constructor for testability.

    Usage:
        >>> auth = AuthService(get_supabase_client())
        >>> user_id = auth.sign_in("me@example.com", "secret")
        >>> auth.username()
        'lifter'
    """

    def __init__(self, client: Client):
        self._client = client

    def sign_in(self, email: str, password: str) -> str:
        """
        Sign in with email and password.

        Returns:
            The signed-in user's id

        Raises:
            AuthError: Missing fields, bad credentials, or unconfirmed email
        """
        if not email or not password:
            raise AuthError("Please enter both email and password")

        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            message = str(e)
            if "Email not confirmed" in message:
                raise AuthError(
                    "Please check your email for the confirmation link.",
                    email_not_confirmed=True,
                ) from e
            logger.warning(f"Sign-in failed for {email}: {message}")
            raise AuthError(message) from e

        if response.user is None:
            raise AuthError("Sign-in returned no user")
        logger.info(f"Signed in user {response.user.id}")
        return str(response.user.id)

    def sign_up(
        self,
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> SignUpResult:
        """
        Create an account, then try to sign in straight away.

        When the immediate sign-in fails (typically because the email must be
        confirmed first) the account still exists; the result says so.

        Raises:
            AuthError: Validation failures or a rejected sign-up
        """
        if not email or not username or not password or not confirm_password:
            raise AuthError("Please fill in all fields")
        username = username.strip()
        if len(username) < MIN_USERNAME_LENGTH:
            raise AuthError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
            )
        if password != confirm_password:
            raise AuthError("Passwords do not match")

        try:
            response = self._client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {
                        "email_redirect_to": EMAIL_REDIRECT_URL,
                        "data": {"Username": username},
                    },
                }
            )
        except Exception as e:
            logger.warning(f"Sign-up failed for {email}: {e}")
            raise AuthError(str(e)) from e

        user_id = str(response.user.id) if response.user else None

        try:
            self._client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.info(f"Account created for {email}; sign-in deferred: {e}")
            return SignUpResult(user_id=user_id, signed_in=False)

        logger.info(f"Account created and signed in: {user_id}")
        return SignUpResult(user_id=user_id, signed_in=True)

    def resend_confirmation(self, email: str) -> None:
        try:
            self._client.auth.resend({"type": "signup", "email": email})
        except Exception as e:
            raise AuthError(str(e)) from e
        logger.info(f"Confirmation email resent to {email}")

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except Exception as e:
            logger.error(f"Sign-out failed: {e}")
            raise AuthError("There was an error logging out. Please try again.") from e

    def _current_user(self) -> Optional[Any]:
        try:
            response = self._client.auth.get_user()
        except Exception as e:
            logger.warning(f"Could not fetch current user: {e}")
            return None
        return response.user if response else None

    def current_user_id(self) -> Optional[str]:
        """The signed-in user's id, or None when nobody is signed in."""
        user = self._current_user()
        return str(user.id) if user else None

    def current_email(self) -> Optional[str]:
        user = self._current_user()
        return user.email if user else None

    def username(self) -> str:
        """Username from auth metadata (either key casing), defaulting to "User"."""
        user = self._current_user()
        if user is None:
            return DEFAULT_USERNAME
        metadata: Dict[str, Any] = user.user_metadata or {}
        return metadata.get("username") or metadata.get("Username") or DEFAULT_USERNAME

    def delete_account(self) -> None:
        """
        Permanently delete the signed-in user's account and data, then sign out.

        Deletion runs server-side in the `delete-user` edge function.
        """
        try:
            self._client.functions.invoke(DELETE_USER_FUNCTION)
        except Exception as e:
            logger.error(f"Error deleting account: {e}")
            raise AuthError(
                f"There was an error deleting your account: {e}. "
                "Please contact support if the issue persists."
            ) from e

        logger.info("Account deleted; signing out")
        self.sign_out()
