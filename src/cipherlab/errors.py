"""Exceptions raised by the cipher operations.

Every failure is scoped to the single requested operation. Nothing here is logged or retried, callers decide how to
report them.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class CipherError(ValueError):
    """Base class for all cipher failures."""


class InvalidKeyError(CipherError):
    """A public or private key component is missing, empty or unusable."""


class CharacterTooLargeError(CipherError):
    """A character code does not fit below the key modulus.

    Attributes:
        code: The offending character code.
        modulus: The modulus of the key used.
    """

    def __init__(self, code: int, modulus: int) -> None:
        self.code = code
        self.modulus = modulus
        super().__init__(f"Character code {code} is too large for the given key size (n={modulus}). "
                         "Please generate larger keys.")


class MalformedCiphertextError(CipherError):
    """A ciphertext token could not be decrypted back into a character.

    Attributes:
        token: The offending ciphertext token.
    """

    def __init__(self, token: str, reason: str = "is not a decimal integer") -> None:
        self.token = token
        super().__init__(f"Ciphertext token {token!r} {reason}.")
