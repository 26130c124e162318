"""
Alphabet
========
The 26-letter ASCII alphabet and the offset arithmetic the cipher
performs in it.
"""

ALPHABET   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHAR_SPACE = len(ALPHABET)   # modulus for every shift

_ORIGIN = ord("A")


def is_letter(ch: str) -> bool:
    """True for ASCII A-Z and a-z only."""
    return ch.isascii() and ch.isalpha()


def offset(ch: str) -> int:
    """
    Position of `ch` in the alphabet, 0-25, ignoring case.

    Non-letters (a key may hold any ASCII) wrap through their code
    point, so '1' shifts by (ord('1') - ord('A')) % 26.
    """
    return (ord(ch.upper()) - _ORIGIN) % CHAR_SPACE


def letter(position: int, like: str) -> str:
    """Alphabet character at `position` (mod 26), cased like `like`."""
    ch = ALPHABET[position % CHAR_SPACE]
    return ch if like.isupper() else ch.lower()
