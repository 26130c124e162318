"""
vigenere_cipher
===============
Vigenère polyalphabetic cipher over the 26-letter ASCII alphabet,
with a small command line (``vigenere`` / ``python -m vigenere_cipher``).

Letters are shifted by a repeating keyword that only advances on
letters; case is preserved and everything else passes through.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet  import ALPHABET, CHAR_SPACE
from .keystream import PLACEHOLDER, generate_keystream
from .cipher    import Mode, VigenereCipher, decrypt, encrypt, transform
from .errors    import (
    HelpRequested,
    InvalidKey,
    KeystreamMismatch,
    UsageError,
    VigenereError,
)

__all__ = [
    "ALPHABET",
    "CHAR_SPACE",
    "PLACEHOLDER",
    "generate_keystream",
    "transform",
    "encrypt",
    "decrypt",
    "Mode",
    "VigenereCipher",
    "VigenereError",
    "InvalidKey",
    "KeystreamMismatch",
    "UsageError",
    "HelpRequested",
]
