"""Toy key generation utility, mainly focusing on the generation of small random primes.

Everything in here is deliberately textbook: primality is decided by trial division, candidates come from the
non-cryptographic `random` module and the key sizes are expected to be tens of bits at most. Suitable for teaching,
unsuitable for anything else.

Typical usage example:

    is_prime(3233)
    p = generate_prime(16)
    (n, e), (n, d) = generate_key_pair(16)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import random
import warnings

logger = logging.getLogger(__name__)

PUBLIC_EXPONENT: int = 65537
DEFAULT_BITS: int = 16


def is_prime(num: int) -> bool:
    """Deterministic primality test by trial division.

    Divides by 2 and 3, then by every candidate of the form 6k +/- 1 up to the square root of `num`.

    Args:
        num: The number to check.

    Returns:
        True if `num` is prime, False otherwise.
    """
    if num <= 1:
        return False
    if num <= 3:
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False
    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True


def generate_prime(bits: int, rng: random.Random | None = None) -> int:
    """Generate a random prime of exactly `bits` bits.

    Draws uniformly from `[2**(bits-1), 2**bits - 1]`, forces the low bit so the candidate is odd and retries until
    `is_prime` accepts it. There is no cap on the number of draws.

    Args:
        bits: Bit width of the prime. Must be at least 2.
        rng: Random generator to draw from. Defaults to the module-level `random` generator.

    Returns:
        A prime number.

    Raises:
        ValueError: If `bits` is smaller than 2.
    """
    if bits < 2:
        raise ValueError("Bit width must be at least 2.")
    rng = rng or random
    low = 1 << (bits - 1)
    high = (1 << bits) - 1
    draws = 0
    while True:
        draws += 1
        candidate = rng.randint(low, high) | 1
        if is_prime(candidate):
            logger.debug("Found %d-bit prime after %d draws", bits, draws)
            return candidate


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(e: int, phi: int) -> int:
    """Computes the modular multiplicative inverse of `e` modulo `phi`.

    Args:
        e: The number to invert.
        phi: The modulus. Must be positive.

    Returns:
        The inverse in `[0, phi - 1]`, or 0 if `phi` is 1.

    Raises:
        ValueError: If `e` and `phi` are not coprime.
    """
    if phi == 1:
        return 0
    g, s, _ = eea(e, phi)
    if g != 1:
        raise ValueError(f"{e} has no inverse modulo {phi}.")
    # Python's modulo already lands in [0, phi - 1] for negative coefficients.
    return s % phi


def generate_key_pair(bits: int = DEFAULT_BITS,
                      rng: random.Random | None = None) -> tuple[tuple[int, int], tuple[int, int]]:
    """Generates a toy RSA key pair.

    Both primes are drawn independently with `bits` bits each. The public exponent starts at 65537 and walks up the
    odd numbers until it is coprime with the totient.

    Args:
        bits: Bit width of each prime. Must be at least 2.
        rng: Random generator to draw from. Defaults to the module-level `random` generator.

    Returns:
        A tuple of (public, private) sub-tuples (modulus, exponent).
    """
    p = generate_prime(bits, rng)
    q = generate_prime(bits, rng)
    if p == q:
        warnings.warn(f"Both primes are {p}; the modulus is a perfect square and trivially factored.", RuntimeWarning)
    n = p * q
    phi = (p - 1) * (q - 1)
    e = PUBLIC_EXPONENT
    while math.gcd(e, phi) != 1:
        e += 2
    d = mod_inverse(e, phi)
    logger.debug("Generated %d-bit modulus with public exponent %d", n.bit_length(), e)
    return (n, e), (n, d)
