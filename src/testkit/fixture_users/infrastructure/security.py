"""Password hashing for accounts kept in the SQL identity store.

Uses bcrypt with automatic salt generation.
"""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a plaintext password using bcrypt.

    Args:
        password: The plaintext password
        rounds: bcrypt work factor

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash using constant-time comparison.

    Args:
        password: The plaintext password to verify
        password_hash: The bcrypt hash to verify against

    Returns:
        True if the password matches the hash, False otherwise
    """
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Malformed hash
        return False
