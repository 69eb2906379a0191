"""Caesar shift cipher over the ASCII alphabets.

Letters rotate inside their own 26-letter alphabet, everything else (digits, punctuation, non-Latin text) is passed
through untouched.

Typical usage example:

    c = caesar_encrypt("Hello, World!", 3)
    m = caesar_decrypt(c, 3)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
ALPHABET_SIZE: int = 26


def _rotate(char: str, shift: int) -> str:
    """Rotate a single character, assuming `shift` is already in [0, 25]."""
    if "A" <= char <= "Z":
        base = ord("A")
    elif "a" <= char <= "z":
        base = ord("a")
    else:
        return char
    return chr((ord(char) - base + shift) % ALPHABET_SIZE + base)


def caesar_encrypt(text: str, shift: int) -> str:
    """Encrypts the text with the Caesar cipher.

    Args:
        text: The text to encrypt.
        shift: Number of positions to rotate each letter by. Any integer, taken modulo 26.

    Returns:
        The shifted text, of the same length as `text`.
    """
    shift %= ALPHABET_SIZE
    return "".join(_rotate(char, shift) for char in text)


def caesar_decrypt(text: str, shift: int) -> str:
    """Decrypts text produced by `caesar_encrypt` with the same shift.

    Args:
        text: The text to decrypt.
        shift: The shift used for encryption.

    Returns:
        The original text.
    """
    return caesar_encrypt(text, (ALPHABET_SIZE - shift % ALPHABET_SIZE) % ALPHABET_SIZE)
