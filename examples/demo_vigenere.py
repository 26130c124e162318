"""
vigenere_cipher — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Encrypts and decrypts a few messages, printing the keystream
alignment for each so the skipped punctuation is visible.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_cipher import VigenereCipher, generate_keystream

LINE = "═" * 70
SAMPLES = [
    ("HELLO WORLD",                    "KEY"),
    ("Hello, World!",                  "key"),
    ("Attack at dawn. Bring coffee.",  "LEMON"),
]

def header(title):
    print(f"\n{LINE}")
    print(f"  {title}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("vigenere_cipher — Keystream + Transform Demo")
for message, key in SAMPLES:
    v  = VigenereCipher(key)
    ct = v.encrypt(message)
    pt = v.decrypt(ct)
    print(f"\n  Key: {key}")
    ok("Message  ", message)
    ok("Keystream", generate_keystream(message, key))
    ok("Encrypted", ct)
    ok("Decrypted", pt)
    assert pt == message

print(f"\n{LINE}")
print("  All samples round-tripped.")
print(f"{LINE}\n")
