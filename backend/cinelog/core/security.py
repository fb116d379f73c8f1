import hashlib
import secrets


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    """
    Hash an opaque token. Session and sign-in tokens are only persisted in
    this form.
    """
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
