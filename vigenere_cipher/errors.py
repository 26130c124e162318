"""
Errors
======
Every failure the cipher or its command line can raise.

Library code raises these where the problem is detected; only
``cli.main`` turns them into exit codes and usage text.
"""


class VigenereError(Exception):
    """Base class for every vigenere_cipher error."""


class InvalidKey(VigenereError, ValueError):
    """The key is empty, so no keystream can be derived from it."""


class KeystreamMismatch(VigenereError):
    """Message and keystream lengths differ. Always a programming error."""

    def __init__(self, message_len: int, keystream_len: int):
        super().__init__(
            f"Keystream length {keystream_len} does not match message length {message_len}."
        )
        self.message_len   = message_len
        self.keystream_len = keystream_len


class UsageError(VigenereError):
    """Malformed, missing or out-of-order command-line arguments."""


class HelpRequested(VigenereError):
    """``-h`` was given. Handled as a failure, like a usage error."""
