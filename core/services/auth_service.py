# =============================================================================
# core/services/auth_service.py - Admin Login and Token Verification
# =============================================================================
# A single admin account guards the listing and delete endpoints.
#
# - login(): checks email/password against the configured credential and
#   issues an HS256 JWT valid for one hour
# - verify_token(): checks signature and expiry; nothing else. Every valid
#   token grants the same access.
#
# Tokens are stateless; there is no server-side session store.
# =============================================================================

import hmac
import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable

from jose import jwt, JWTError, ExpiredSignatureError

from app.config import Settings
from app.exceptions import AdminNotConfiguredError, InvalidCredentialsError, InvalidTokenError
from core.models.auth import AdminCredential, AdminIdentity, TokenPayload
from lib.utils import utc_now

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=1)

CredentialLoader = Callable[[], AdminCredential | None]


# =============================================================================
# Credential Sources
# =============================================================================

def read_credentials_file(path: Path) -> AdminCredential | None:
    """
    Read {email, password} from a JSON file.

    A missing file is created as "{}" so operators can see where the
    credential belongs. Empty, unreadable or incomplete files yield None.
    """
    try:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("{}", encoding="utf-8")
            logger.warning(f"Created empty admin credentials file at {path}")
            return None

        data = json.loads(path.read_text(encoding="utf-8"))

    except (OSError, ValueError) as e:
        logger.error(f"Failed to read admin credentials from {path}: {e}")
        return None

    if not isinstance(data, dict):
        return None

    email, password = data.get("email"), data.get("password")
    if not isinstance(email, str) or not isinstance(password, str):
        return None
    if not email.strip() or not password:
        return None

    return AdminCredential(email=email, password=password)


def settings_credential_loader(settings: Settings) -> CredentialLoader:
    """
    Credential source for the running app.

    ADMIN_EMAIL/ADMIN_PASSWORD win when both are set; otherwise the
    credentials file is consulted on every call.
    """
    def load() -> AdminCredential | None:
        if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
            return AdminCredential(email=settings.ADMIN_EMAIL, password=settings.ADMIN_PASSWORD)
        return read_credentials_file(settings.admin_credentials_path)

    return load


def _matches(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


# =============================================================================
# Service
# =============================================================================

class AuthService:
    """
    Issues and verifies admin tokens.

    Args:
        secret_key: HMAC secret used to sign tokens
        credential_loader: Returns the admin credential, or None when unset
    """

    def __init__(self, secret_key: str, credential_loader: CredentialLoader):
        self.secret_key = secret_key
        self.credential_loader = credential_loader

    def login(self, email: Any, password: Any) -> str:
        """
        Exchange the admin email/password for a token.

        The email is compared with surrounding whitespace removed on both
        sides; the password must match exactly. Anything that isn't a string
        (missing, null, numbers) is simply a mismatch.

        Raises:
            AdminNotConfiguredError: If no credential is configured
            InvalidCredentialsError: If email or password doesn't match
        """
        credential = self.credential_loader()
        if credential is None:
            logger.error("Admin login attempted but no credential is configured")
            raise AdminNotConfiguredError()

        if not isinstance(email, str) or not isinstance(password, str):
            logger.warning("Admin login failed: email or password missing or not a string")
            raise InvalidCredentialsError()

        email_ok = _matches(email.strip(), credential.email.strip())
        password_ok = _matches(password, credential.password)

        if not (email_ok and password_ok):
            logger.warning("Admin login failed: invalid credentials")
            raise InvalidCredentialsError()

        logger.info("Admin login succeeded")
        return self.issue_token(credential.email.strip())

    def issue_token(self, email: str, now: datetime | None = None) -> str:
        """
        Sign a token for `email` valid for one hour from `now`.
        """
        issued = now or utc_now()
        claims = {
            "email": email,
            "iat": int(issued.timestamp()),
            "exp": int((issued + TOKEN_LIFETIME).timestamp()),
        }
        return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> AdminIdentity:
        """
        Check a token's signature and expiry.

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired
        """
        try:
            payload = TokenPayload(**jwt.decode(token, self.secret_key, algorithms=[ALGORITHM]))

        except ExpiredSignatureError:
            logger.warning("Admin token has expired")
            raise InvalidTokenError("expired")

        except (JWTError, TypeError, ValueError) as e:
            logger.warning(f"Admin token validation failed: {e}")
            raise InvalidTokenError("invalid")

        return AdminIdentity(email=payload.email)
