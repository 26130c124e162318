"""
Keystream
=========
Expands a keyword into a keystream aligned with the message.

The key only advances on letters: spaces and punctuation receive a
placeholder and do not consume a key character, so

    message   HELLO WORLD
    keystream KEYKE YKEYK

for the key "KEY".
"""

import logging

from .alphabet import is_letter
from .errors import InvalidKey

logger = logging.getLogger(__name__)

PLACEHOLDER = " "


def generate_keystream(message: str, key: str) -> str:
    """
    Return a keystream of len(message) characters.

    Letter positions carry the uppercased key character for that
    position; every other position carries PLACEHOLDER.
    Raises InvalidKey when `key` is empty.
    """
    if not key:
        raise InvalidKey("Vigenère key must not be empty.")
    key = key.upper()
    stream = []
    k_idx = 0
    for ch in message:
        if is_letter(ch):
            stream.append(key[k_idx % len(key)])
            k_idx += 1
        else:
            stream.append(PLACEHOLDER)
    logger.debug(f"Keystream: {len(stream)} chars, {k_idx} letters, key period {len(key)}")
    return "".join(stream)
