"""Password hashing service using bcrypt.

Provides secure password hashing and verification with configurable
work factor and strength validation.
"""

import bcrypt

from attendance_auth.exceptions import CorruptCredentialError, WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password strength validation.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> digest = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", digest)
    True
    >>> service.verify("wrong_password", digest)
    False
    """

    DEFAULT_ROUNDS = 12
    DEFAULT_MIN_LENGTH = 8
    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(
        self,
        rounds: int = DEFAULT_ROUNDS,
        min_length: int = DEFAULT_MIN_LENGTH,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Raise it as hardware gets faster; existing digests can be
            found with ``needs_rehash``.
        min_length
            Minimum password length enforced by ``validate_strength``.
        """
        if not 4 <= rounds <= 31:
            msg = "bcrypt rounds must be between 4 and 31"
            raise ValueError(msg)
        self._rounds = rounds
        self._min_length = min_length

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If the password exceeds bcrypt's input limit
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        The comparison is bcrypt's own constant-time check.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        CorruptCredentialError
            If the stored hash is not a valid bcrypt digest
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            # Could never have been hashed by this service
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError) as e:
            raise CorruptCredentialError from e

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum ``min_length`` characters (default 8)
        - Maximum 72 bytes (UTF-8 encoded)

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self._min_length:
            msg = f"Password must be at least {self._min_length} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash needs to be rehashed.

        After raising the rounds setting, existing hashes can be
        identified for rehashing on next login.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError, AttributeError):
            pass
        return True
