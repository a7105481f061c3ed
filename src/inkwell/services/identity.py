"""Identity provider: accounts, sign-in, bearer tokens and email verification."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from email_validator import EmailNotValidError, validate_email
from jose import JWTError

from inkwell.core import security
from inkwell.core.errors import AuthError, ErrorMessages, ValidationError
from inkwell.core.settings import Settings
from inkwell.models.states import UserRole
from inkwell.schemas.user import AuthUser
from inkwell.services.store import DocumentStore
from inkwell.services.subscriptions import Subscription

logger = logging.getLogger(__name__)

AuthListener = Callable[[AuthUser | None], None]


class IdentityProvider:
    """Owns credentials and sessions; the rest of the app only sees ``AuthUser``."""

    def __init__(self, store: DocumentStore, settings: Settings) -> None:
        self._store = store
        self._settings = settings
        self._revoked: set[str] = set()
        self._listeners: list[tuple[Subscription, AuthListener]] = []

    def sign_up(self, email: str, password: str, display_name: str) -> tuple[str, AuthUser]:
        """Create an account and profile, returning ``(token, user)``.

        Raises:
            ValidationError: For a malformed email, weak password or taken email.
        """
        try:
            email = validate_email(email.strip(), check_deliverability=False).normalized.lower()
        except EmailNotValidError as err:
            raise ValidationError(ErrorMessages.AUTH_INVALID_EMAIL) from err
        display_name = display_name.strip()
        if len(password) < self._settings.password_min_length:
            raise ValidationError(ErrorMessages.AUTH_WEAK_PASSWORD)
        if not display_name:
            raise ValidationError(ErrorMessages.required_field("Display name"))
        if self._store.email_exists(email):
            raise ValidationError(ErrorMessages.AUTH_EMAIL_IN_USE)

        admin_email = (self._settings.admin_email or "").strip().lower()
        role = UserRole.ADMIN if admin_email and email == admin_email else UserRole.USER
        password_hash = security.hash_password(password)
        profile = self._store.add_account(
            uid=uuid.uuid4().hex,
            email=email,
            password_hash=password_hash,
            display_name=display_name,
            role=role,
        )
        logger.info("Registered %s with role %s", profile.uid, role)
        self.send_verification_email(profile.uid)
        return self._start_session(profile.uid)

    def sign_in(self, email: str, password: str) -> tuple[str, AuthUser]:
        credentials = self._store.get_credentials(email.strip().lower())
        if credentials is None or not security.verify_password(password, credentials.password_hash):
            raise AuthError(ErrorMessages.AUTH_WRONG_PASSWORD)
        return self._start_session(credentials.uid)

    def sign_out(self, token: str) -> None:
        """Revoke ``token``; later calls to :meth:`current_user` with it fail."""
        claims = self._claims(token)
        self._revoked.add(str(claims["jti"]))
        self._notify(None)

    def current_user(self, token: str) -> AuthUser:
        """Resolve a bearer token to the signed-in user.

        Raises:
            AuthError: If the token is invalid, revoked or its account is gone.
        """
        claims = self._claims(token)
        user = self._store.get_auth_user(str(claims["sub"]))
        if user is None:
            raise AuthError(ErrorMessages.AUTH_REQUIRED)
        return user

    def send_verification_email(self, uid: str) -> str:
        """Issue a fresh verification token for ``uid`` and return it.

        There is no mail transport; the link is written to the log.
        """
        token = security.new_verification_token()
        if not self._store.set_verification_token(uid, token):
            raise AuthError(ErrorMessages.AUTH_REQUIRED)
        logger.info("Verification link for %s: /verify-email?token=%s", uid, token)
        return token

    def confirm_email(self, token: str) -> AuthUser:
        uid = self._store.confirm_verification(token)
        user = self._store.get_auth_user(uid) if uid else None
        if user is None:
            raise AuthError(ErrorMessages.AUTH_INVALID_VERIFICATION)
        self._notify(user)
        return user

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        """Call ``listener`` on every sign-in, sign-out and verification."""

        def cancel(sub: Subscription) -> None:
            self._listeners = [entry for entry in self._listeners if entry[0] is not sub]

        subscription = Subscription(cancel)
        self._listeners.append((subscription, listener))
        return subscription

    def _start_session(self, uid: str) -> tuple[str, AuthUser]:
        user = self._store.get_auth_user(uid)
        if user is None:
            raise AuthError(ErrorMessages.AUTH_REQUIRED)
        token = security.create_access_token(uid, self._settings)
        self._notify(user)
        return token, user

    def _claims(self, token: str) -> dict[str, object]:
        try:
            claims = security.decode_access_token(token, self._settings)
        except JWTError as err:
            raise AuthError(ErrorMessages.AUTH_REQUIRED) from err
        if str(claims.get("jti")) in self._revoked:
            raise AuthError(ErrorMessages.AUTH_SIGNED_OUT)
        return claims

    def _notify(self, user: AuthUser | None) -> None:
        for _, listener in list(self._listeners):
            listener(user)
