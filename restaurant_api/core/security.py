"""
Password hashing helpers (bcrypt).
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input and refuses anything longer
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash ``password`` with a fresh salt and return the encoded hash."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")
