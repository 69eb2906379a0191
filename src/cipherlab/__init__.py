"""Classic ciphers for the classroom.

Provides a Caesar shift cipher and a toy, per-character RSA with tiny keys, including the small number theory needed
to generate those keys. None of this is secure; it exists to show how the arithmetic works.

Typical usage example:

    c = caesar_encrypt("abcXYZ", 3)
    keys = generate_rsa_keys(16)
    c = rsa_encrypt("Hi there!", keys.public_key.e, keys.public_key.n)
    r = rsa_decrypt(c, keys.private_key.d, keys.private_key.n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from cipherlab.caesar import caesar_decrypt
from cipherlab.caesar import caesar_encrypt
from cipherlab.errors import CharacterTooLargeError
from cipherlab.errors import CipherError
from cipherlab.errors import InvalidKeyError
from cipherlab.errors import MalformedCiphertextError
from cipherlab.keygen import generate_prime
from cipherlab.keygen import is_prime
from cipherlab.keygen import mod_inverse
from cipherlab.rsa import PrivateKey
from cipherlab.rsa import PublicKey
from cipherlab.rsa import RsaKeyPair
from cipherlab.rsa import generate_rsa_keys
from cipherlab.rsa import mod_pow
from cipherlab.rsa import rsa_decrypt
from cipherlab.rsa import rsa_encrypt
from cipherlab.session import CipherSession

__version__ = "0.1.0"
__all__ = [
    "caesar_encrypt",
    "caesar_decrypt",
    "generate_rsa_keys",
    "rsa_encrypt",
    "rsa_decrypt",
    "mod_pow",
    "mod_inverse",
    "is_prime",
    "generate_prime",
    "PublicKey",
    "PrivateKey",
    "RsaKeyPair",
    "CipherSession",
    "CipherError",
    "InvalidKeyError",
    "CharacterTooLargeError",
    "MalformedCiphertextError",
]
