"""
vigenere_cipher — Command Line Test Suite
=========================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
import subprocess
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_cipher.cli    import Invocation, main, parse_args, run
from vigenere_cipher.cipher import Mode
from vigenere_cipher.errors import HelpRequested, UsageError

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ── parse_args ────────────────────────────────────────────────────────────────
def test_parse_defaults_to_encrypt():
    inv = parse_args(["HELLO", "-k", "KEY"])
    assert inv == Invocation(message="HELLO", key="KEY", mode=Mode.ENCRYPT)

def test_parse_decrypt_mode():
    assert parse_args(["RIJVS", "-m", "1", "-k", "KEY"]).mode is Mode.DECRYPT

def test_parse_long_flags():
    inv = parse_args(["RIJVS", "--mode", "1", "--key", "KEY"])
    assert inv.mode is Mode.DECRYPT and inv.key == "KEY"

def test_parse_help():
    with pytest.raises(HelpRequested):
        parse_args(["-h"])

def test_parse_message_may_start_with_dash():
    assert parse_args(["-abc", "-k", "b"]).message == "-abc"

def test_parse_key_may_start_with_dash():
    assert parse_args(["abc", "-k", "-b"]).key == "-b"

@pytest.mark.parametrize("key", ["--", "-", "a=b", "-k", "--mode"])
def test_parse_key_taken_verbatim(key):
    assert parse_args(["hello", "-k", key]).key == key

@pytest.mark.parametrize("argv", [
    [],
    ["", "-k", "KEY"],
    ["HELLO"],
    ["HELLO", "-k"],
    ["HELLO", "-m"],
    ["HELLO", "-m", "1"],
    ["HELLO", "-m", "2", "-k", "KEY"],
    ["HELLO", "-m", "x", "-k", "KEY"],
    ["HELLO", "-k", "KEY", "-m", "1"],
    ["HELLO", "-k", "KEY", "extra"],
    ["HELLO", "-x", "KEY"],
    ["HELLO", "-h"],
])
def test_parse_usage_errors(argv):
    with pytest.raises(UsageError):
        parse_args(argv)

def test_run_pipeline():
    assert run(Invocation(message="HELLO", key="KEY")) == "RIJVS"
    assert run(Invocation(message="RIJVS", key="KEY", mode=Mode.DECRYPT)) == "HELLO"

# ── main ──────────────────────────────────────────────────────────────────────
def test_main_encrypts(capsys):
    assert main(["HELLO", "-k", "KEY"]) == 0
    out, err = capsys.readouterr()
    assert out == "RIJVS\n"
    assert err == ""

def test_main_decrypts(capsys):
    assert main(["Rijvs, Uyvjn!", "-m", "1", "-k", "key"]) == 0
    assert capsys.readouterr().out == "Hello, World!\n"

def test_main_dash_message(capsys):
    assert main(["-abc", "-k", "b"]) == 0
    assert capsys.readouterr().out == "-bcd\n"

def test_main_double_dash_key(capsys):
    assert main(["hello", "-k", "--"]) == 0
    assert capsys.readouterr().out == "nkrru\n"

def test_main_double_dash_message(capsys):
    assert main(["--", "-k", "KEY"]) == 0
    assert capsys.readouterr().out == "--\n"

def test_main_no_arguments(capsys):
    assert main([]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith('usage: vigenere [-h] "message" [-m MODE] [-k "KEY"]')

def test_main_help(capsys):
    assert main(["-h"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("usage: vigenere")
    assert "keyword to use" in err
    assert "--mode MODE" in err

def test_main_empty_key(capsys):
    assert main(["HELLO", "-k", ""]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("usage: vigenere")
    assert "keyword to use" not in err

def test_main_bad_mode(capsys):
    assert main(["HELLO", "-m", "7", "-k", "KEY"]) == 1
    assert capsys.readouterr().out == ""

# ── python -m vigenere_cipher ─────────────────────────────────────────────────
def test_module_entry_point():
    proc = subprocess.run(
        [sys.executable, "-m", "vigenere_cipher", "HELLO WORLD", "-k", "KEY"],
        cwd=ROOT, capture_output=True, text=True,
    )
    assert proc.returncode == 0
    assert proc.stdout == "RIJVS UYVJN\n"

def test_module_entry_point_usage():
    proc = subprocess.run(
        [sys.executable, "-m", "vigenere_cipher"],
        cwd=ROOT, capture_output=True, text=True,
    )
    assert proc.returncode == 1
    assert proc.stdout == ""
    assert proc.stderr.startswith("usage: vigenere")
