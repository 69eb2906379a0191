"""Holds the key pair of an interactive session and routes cipher requests.

The session plays the part of the user interface: it picks the algorithm and direction, owns the current RSA key pair
and generates one on first use when encrypting.

Typical usage example:

    session = CipherSession()
    c = session.process("rsa", "encrypt", "Hi there!")
    r = session.process("rsa", "decrypt", c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
from typing import Callable

from cipherlab.caesar import caesar_decrypt
from cipherlab.caesar import caesar_encrypt
from cipherlab.errors import InvalidKeyError
from cipherlab.rsa import RsaKeyPair
from cipherlab.rsa import generate_rsa_keys

logger = logging.getLogger(__name__)

SESSION_BITS: int = 32
DEFAULT_SHIFT: int = 3
ALGORITHMS = ("caesar", "rsa")
MODES = ("encrypt", "decrypt")


class CipherSession:
    """Per-session cipher state.

    Attributes:
        bits: Bit width of each prime when keys are generated.
        keys: The current key pair, or None until one is generated.
    """

    def __init__(self, bits: int = SESSION_BITS, rng: random.Random | None = None,
                 keys: RsaKeyPair | None = None) -> None:
        self.bits = bits
        self.keys = keys
        self._rng = rng
        self._handlers: dict[tuple[str, str], Callable[[str, int], str]] = {
            ("caesar", "encrypt"): caesar_encrypt,
            ("caesar", "decrypt"): caesar_decrypt,
            ("rsa", "encrypt"): self._rsa_encrypt,
            ("rsa", "decrypt"): self._rsa_decrypt,
        }

    def regenerate_keys(self, bits: int | None = None) -> RsaKeyPair:
        """Replaces the current key pair with a freshly generated one.

        Args:
            bits: Bit width of each prime. Defaults to the session setting.

        Returns:
            The new key pair.
        """
        bits = self.bits if bits is None else bits
        keys = generate_rsa_keys(bits, self._rng)
        self.keys = keys
        logger.debug("Session keys regenerated with %d-bit primes", bits)
        return keys

    def process(self, algorithm: str, mode: str, text: str, shift: int = DEFAULT_SHIFT) -> str:
        """Runs one cipher request.

        Args:
            algorithm: Either "caesar" or "rsa".
            mode: Either "encrypt" or "decrypt".
            text: The text to transform.
            shift: The Caesar shift. Ignored by RSA.

        Returns:
            The transformed text.

        Raises:
            KeyError: If the algorithm or mode is unknown.
            CipherError: If the underlying cipher fails. The held keys are left as they were.
        """
        try:
            handler = self._handlers[(algorithm, mode)]
        except KeyError:
            raise KeyError(f"Unknown algorithm or mode: {algorithm}/{mode}") from None
        return handler(text, shift)

    def _rsa_encrypt(self, text: str, _shift: int) -> str:
        if self.keys is None:
            self.regenerate_keys()
        return self.keys.public_key.encrypt(text)

    def _rsa_decrypt(self, text: str, _shift: int) -> str:
        if self.keys is None:
            raise InvalidKeyError("No RSA keys available, please generate keys first.")
        return self.keys.private_key.decrypt(text)
