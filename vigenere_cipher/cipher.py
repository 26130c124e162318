"""
Vigenère Polyalphabetic Cipher
==============================
Shifts every letter of the message by the alphabet offset of the
keystream character at the same position, modulo 26.

    encrypt:  c = (m + k) mod 26
    decrypt:  c = (m - k + 26) mod 26

Letters keep their case. Anything that is not an ASCII letter passes
through untouched, and the key is not consumed by it (see keystream).

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years. Not modern-secure.
"""

import enum
import logging

from .alphabet import CHAR_SPACE, is_letter, letter, offset
from .errors import InvalidKey, KeystreamMismatch
from .keystream import generate_keystream

logger = logging.getLogger(__name__)


class Mode(enum.IntEnum):
    ENCRYPT = 0
    DECRYPT = 1


def transform(message: str, keystream: str, mode: Mode = Mode.ENCRYPT) -> str:
    """
    Apply the keystream to `message` in the given mode.
    `keystream` must come from generate_keystream() for this message.
    """
    mode = Mode(mode)
    if len(message) != len(keystream):
        raise KeystreamMismatch(len(message), len(keystream))
    sign = 1 if mode is Mode.ENCRYPT else -1
    result = []
    for ch, k in zip(message, keystream):
        if is_letter(ch):
            shifted = (offset(ch) + sign * offset(k) + CHAR_SPACE) % CHAR_SPACE
            result.append(letter(shifted, like=ch))
        else:
            result.append(ch)
    logger.debug(f"{mode.name.lower()}: {len(message)} chars")
    return "".join(result)


def encrypt(plaintext: str, key: str) -> str:
    return transform(plaintext, generate_keystream(plaintext, key), Mode.ENCRYPT)


def decrypt(ciphertext: str, key: str) -> str:
    return transform(ciphertext, generate_keystream(ciphertext, key), Mode.DECRYPT)


class VigenereCipher:
    """Vigenère cipher bound to one key."""

    def __init__(self, key: str):
        if not key:
            raise InvalidKey("Vigenère key must not be empty.")
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def keystream(self, message: str) -> str:
        return generate_keystream(message, self._key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        return transform(plaintext, self.keystream(plaintext), Mode.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return transform(ciphertext, self.keystream(ciphertext), Mode.DECRYPT)

    def apply(self, message: str, mode: Mode) -> str:
        return transform(message, self.keystream(message), mode)

    def __repr__(self):
        return f"VigenereCipher(period={len(self._key)})"
