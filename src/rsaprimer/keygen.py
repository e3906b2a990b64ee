"""Core Key Generation Utility, tying prime sampling, exponent derivation and key validation together.

Keys follow the PKCS #1 mathematical model with lambda(n) = (p - 1)(q - 1). Every invalid intermediate state (equal
primes, a modulus of the wrong size, a public exponent sharing a factor with lambda, a failed round-trip) is retried
silently. All loops are bounded by generous caps so a broken random source surfaces as an error instead of a hang.

Typical usage example:

    key = generate(512)
    key = generate(8, rng=random.Random(42))
    (n, e), (n, d) = generate_key_pair(512)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
from typing import Literal, NamedTuple, overload

from rsaprimer import primes
from rsaprimer.euclid import gcd
from rsaprimer.euclid import modular_inverse
from rsaprimer.exceptions import KeyGenerationExhausted
from rsaprimer.exceptions import KeyValidationFailed
from rsaprimer.rsa import RSAPrivKey
from rsaprimer.rsa import RSAPubKey

log = logging.getLogger(__name__)

MIN_KEY_SIZE: int = 8
DEFAULT_KEY_SIZE: int = 512
KEY_ATTEMPTS: int = 1000
EXPONENT_ATTEMPTS: int = 1000
CHECK_MESSAGES: range = range(9)


class Key(NamedTuple):
    """An RSA key with its generating primes.

    Attributes:
        p: First prime.
        q: Second prime, distinct from `p`.
        n: The modulus p*q.
        e: Public exponent, coprime to lambda(n).
        d: Private exponent, inverse of `e` modulo lambda(n).
    """
    p: int
    q: int
    n: int
    e: int
    d: int

    @property
    def totient(self) -> int:
        """lambda(n) = (p - 1)(q - 1), recomputed from the primes."""
        return (self.p - 1) * (self.q - 1)

    @property
    def bits(self) -> int:
        return self.n.bit_length()


def _check_size(bits: int) -> None:
    if bits < MIN_KEY_SIZE:
        raise ValueError(f"Size must be at least {MIN_KEY_SIZE}.")
    if bits % 2 != 0:
        raise ValueError("Size must be an even number.")


def generate_modulus(bits: int, rng: random.Random) -> tuple[int, int, int]:
    """Samples two distinct primes whose product has exactly `bits` bits.

    The primes are drawn from a range spanning two bit lengths, so the product misses the target size regularly and
    is redrawn. Both this loop and the one in `generate()` are bounded by `KEY_ATTEMPTS`.

    Args:
        bits: Target bit length of the modulus.
        rng: Random source.

    Returns:
        Tuple of (p, q, n).

    Raises:
        KeyGenerationExhausted: If no fitting pair was found in `KEY_ATTEMPTS` draws.
    """
    for _ in range(KEY_ATTEMPTS):
        p = primes.random_prime(bits, rng)
        q = primes.random_prime(bits, rng)
        if p == q:  # (Un)Likely story, except for tiny keys.
            log.debug("Drew identical primes, redrawing.")
            continue
        n = p * q
        if n.bit_length() == bits:
            return p, q, n
        log.debug("Modulus has %d bits instead of %d, redrawing.", n.bit_length(), bits)
    raise KeyGenerationExhausted(f"Found no pair of primes forming a {bits}-bit modulus in {KEY_ATTEMPTS} draws.")


def sample_public_exponent(totient: int, n: int, rng: random.Random) -> int | None:
    """Samples a public exponent uniformly from [1, n) that is coprime to `totient`.

    Args:
        totient: lambda(n).
        n: The modulus, exclusive upper bound for the exponent.
        rng: Random source.

    Returns:
        The public exponent, or None if `EXPONENT_ATTEMPTS` candidates all shared a factor with `totient`.
    """
    for _ in range(EXPONENT_ATTEMPTS):
        e = rng.randrange(1, n)
        if gcd(e, totient) == 1:
            return e
    return None


def derive_exponents(totient: int, n: int, rng: random.Random) -> tuple[int, int] | None:
    """Derives a matching (e, d) pair for the given modulus.

    Args:
        totient: lambda(n).
        n: The modulus.
        rng: Random source.

    Returns:
        Tuple of (e, d) with e*d = 1 (mod totient), or None if no pair was found within `EXPONENT_ATTEMPTS` tries.
    """
    for _ in range(EXPONENT_ATTEMPTS):
        e = sample_public_exponent(totient, n, rng)
        if e is None:
            return None
        d = modular_inverse(e, totient)
        if e * d % totient == 1:
            return e, d
        log.debug("Inverse check failed for a sampled exponent, resampling.")
    return None


def check_key(key: Key) -> bool:
    """Checks a key against the RSA invariants.

    Lambda is recomputed from the primes. The check messages 0 through 8 must survive an encrypt-then-decrypt round.

    Args:
        key: The key to check.

    Returns:
        True if the key is valid, False otherwise.
    """
    try:
        validate_key(key)
    except KeyValidationFailed as err:
        log.debug("%s", err)
        return False
    return True


def validate_key(key: Key) -> None:
    """Raising counterpart of `check_key()`.

    Args:
        key: The key to validate.

    Raises:
        KeyValidationFailed: Naming the first invariant the key violates.
    """
    if key.p == key.q:
        raise KeyValidationFailed("primes are equal")
    if key.p * key.q != key.n:
        raise KeyValidationFailed("modulus is not the product of the primes")
    totient = key.totient
    if totient <= 1 or key.e * key.d % totient != 1:
        raise KeyValidationFailed("exponents are not inverse modulo lambda(n)")
    pub = RSAPubKey(key.n, key.e)
    priv = RSAPrivKey(key.n, key.d)
    for message in CHECK_MESSAGES:
        if priv.decrypt(pub.encrypt(message)) != message:
            raise KeyValidationFailed(f"check message {message} did not survive a round trip")


def generate(bits: int = DEFAULT_KEY_SIZE, rng: random.Random | None = None, max_attempts: int = KEY_ATTEMPTS) -> Key:
    """Generates a validated RSA key.

    Fully generates a valid RSA Key, retrying the whole construction whenever an exponent pair cannot be found or the
    finished key fails validation.

    Args:
        bits: Bit length of the modulus. Must be even and >= `MIN_KEY_SIZE`.
        rng: Random source providing `randrange`. Defaults to the system random source.
        max_attempts: Number of full constructions to try. Defaults to `KEY_ATTEMPTS`.

    Returns:
        A key whose modulus has exactly `bits` bits.

    Raises:
        ValueError: If `bits` is odd or too small.
        KeyGenerationExhausted: If no valid key was produced in `max_attempts` constructions.
    """
    _check_size(bits)
    if rng is None:
        rng = primes.default_rng()
    for attempt in range(1, max_attempts + 1):
        p, q, n = generate_modulus(bits, rng)
        totient = (p - 1) * (q - 1)
        exponents = derive_exponents(totient, n, rng)
        if exponents is None:
            log.debug("No exponent pair found on attempt %d, restarting.", attempt)
            continue
        e, d = exponents
        key = Key(p, q, n, e, d)
        if check_key(key):
            log.info("Generated a %d-bit key after %d attempt(s).", bits, attempt)
            return key
        log.debug("Key failed validation on attempt %d, restarting.", attempt)
    raise KeyGenerationExhausted(
        f"Run an improbable {max_attempts} key constructions with no valid key. Check system random number generator.")


@overload
def generate_key_pair(bits: int,
                      rng: random.Random | None = None,
                      expose_primes: Literal[False] = False) -> tuple[tuple[int, int], tuple[int, int]]:
    ...


@overload
def generate_key_pair(bits: int,
                      rng: random.Random | None = None,
                      expose_primes: Literal[True] = False) -> tuple[tuple[int, int], tuple[int, int, int, int]]:
    ...


def generate_key_pair(
    bits: int,
    rng: random.Random | None = None,
    expose_primes: bool = False
) -> tuple[tuple[int, int], tuple[int, int]] | tuple[tuple[int, int], tuple[int, int, int, int]]:
    """Generates an RSA key pair as plain tuples.

    Args:
        bits: Bit length of the modulus. Must be even and >= `MIN_KEY_SIZE`.
        rng: Random source. Defaults to the system random source.
        expose_primes: Whether to export the prime numbers as well or not. Defaults to False.

    Returns:
        A tuple of (public, private) sub-tuples (modulus, exponent) or if exposed for the private
        (modulus, exponent, p, q)
    """
    key = generate(bits, rng)
    if not expose_primes:
        return (key.n, key.e), (key.n, key.d)
    return (key.n, key.e), (key.n, key.d, key.p, key.q)
