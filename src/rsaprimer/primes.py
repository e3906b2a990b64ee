"""Primality screening and random prime sampling.

Candidates pass through a Fermat screen on a handful of small bases before a Miller-Rabin screen on fixed bases
catches the Fermat liars (Carmichael numbers among them). The screens are heuristic: bases are fixed rather than
random, which is plenty for a teaching-grade key generator but is no primality proof.

Typical usage example:

    is_prime(561)
    p = random_prime(512)
    p = random_prime(512, rng=random.Random(1234))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
import secrets

from rsaprimer.exceptions import PrimeGenerationFailed

log = logging.getLogger(__name__)

FERMAT_BASE_BOUND: int = 8
MILLER_RABIN_BASES: tuple[int, ...] = (2, 3)
PRIME_ATTEMPTS_PER_BIT: int = 10

_SYSTEM_RANDOM = secrets.SystemRandom()


def default_rng() -> random.Random:
    """The process-wide random source used whenever no `rng` is supplied."""
    return _SYSTEM_RANDOM


def _fermat_screen(candidate: int, bound: int = FERMAT_BASE_BOUND) -> bool:
    """Fermat pre-filter over the small bases 2, 3, ... below `bound`.

    Bases that are not smaller than `candidate` are skipped, as b**(n-1) is 0 for b = n.

    Args:
        candidate: The number to screen. Must be >= 2.
        bound: Exclusive upper bound for the trial bases. Defaults to `FERMAT_BASE_BOUND`.

    Returns:
        False if some base proves `candidate` composite, True otherwise.
    """
    exponent = candidate - 1
    for base in range(2, min(bound, candidate)):
        if pow(base, exponent, candidate) != 1:
            return False
    return True


def _decompose(candidate: int) -> tuple[int, int]:
    """Splits `candidate - 1` into 2**twos * odd_part.

    Args:
        candidate: Odd integer >= 3.

    Returns:
        Tuple of (twos, odd_part).
    """
    odd_part = candidate - 1
    twos = 0
    while odd_part % 2 == 0:
        odd_part //= 2
        twos += 1
    return twos, odd_part


def _miller_rabin(candidate: int, bases: tuple[int, ...] = MILLER_RABIN_BASES) -> bool:
    """Miller-Rabin screen over fixed bases.

    For every base below `candidate - 1` the residue base**odd_part is squared `twos` times. A square root of unity
    other than +-1 proves `candidate` composite, as does a final residue base**(candidate - 1) other than 1.

    Args:
        candidate: The number to screen.
        bases: Ascending bases to try. Defaults to `MILLER_RABIN_BASES`.

    Returns:
        True if `candidate` is probably prime, False otherwise.

    Raises:
        ValueError: If `bases` is empty.
    """
    if not bases:
        raise ValueError("At least one Miller-Rabin base is required.")
    if candidate < bases[0] or candidate % 2 == 0:
        return False
    twos, odd_part = _decompose(candidate)
    minus_one = candidate - 1
    for base in bases:
        if base >= minus_one:
            break
        residue = pow(base, odd_part, candidate)
        for _ in range(twos):
            squared = residue * residue % candidate
            if squared == 1 and residue != 1 and residue != minus_one:
                return False
            residue = squared
        if residue != 1:
            return False
    return True


def is_prime(candidate: int,
             fermat_bound: int = FERMAT_BASE_BOUND,
             bases: tuple[int, ...] = MILLER_RABIN_BASES) -> bool:
    """Decides whether `candidate` is probably prime.

    Composites caught by either screen are rejected with certainty, acceptance is probabilistic.

    Args:
        candidate: The candidate prime to test.
        fermat_bound: Exclusive bound on the Fermat screen bases. Passed to `_fermat_screen()`.
        bases: Bases for the Miller-Rabin screen. Passed to `_miller_rabin()`.

    Returns:
        True if `candidate` is probably prime, False otherwise.

    Raises:
        ValueError: If `bases` is empty.
    """
    if not bases:
        raise ValueError("At least one Miller-Rabin base is required.")
    if candidate < 2:
        return False
    if candidate == 2:
        return True
    if candidate % 2 == 0:
        return False
    if not _fermat_screen(candidate, fermat_bound):
        return False
    return _miller_rabin(candidate, bases)


def prime_range(bits: int) -> tuple[int, int]:
    """The half-open sampling range [2**(bits//2 - 1), 2**(bits//2 + 1)) for primes of a `bits` sized modulus."""
    half = bits // 2
    return 1 << (half - 1), 1 << (half + 1)


def random_prime(bits: int, rng: random.Random | None = None, max_attempts: int | None = None) -> int:
    """Samples a random probable prime for a modulus of `bits` bits.

    Draws odd candidates uniformly from `prime_range(bits)` until one passes `is_prime()`. The range spans two bit
    lengths on purpose, the caller checks the size of the resulting modulus.

    Args:
        bits: Bit length of the targeted modulus. Must be >= 4.
        rng: Random source providing `randrange`. Defaults to the system random source.
        max_attempts: Number of candidates to draw before giving up.
            Defaults to `PRIME_ATTEMPTS_PER_BIT * bits`.

    Returns:
        A probable prime.

    Raises:
        ValueError: If `bits` is too small to leave any odd candidate.
        PrimeGenerationFailed: If no candidate was accepted in `max_attempts` draws.
    """
    if bits < 4:
        raise ValueError("bits must be >= 4.")
    if rng is None:
        rng = default_rng()
    if max_attempts is None:
        max_attempts = PRIME_ATTEMPTS_PER_BIT * bits
    lower, upper = prime_range(bits)
    for attempt in range(1, max_attempts + 1):
        # Lower bound is even and upper bound exclusive, so setting the low bit stays in range.
        candidate = rng.randrange(lower, upper) | 1
        if is_prime(candidate):
            log.debug("Accepted %d-bit prime candidate after %d draws.", candidate.bit_length(), attempt)
            return candidate
    raise PrimeGenerationFailed(
        f"Drew an improbable {max_attempts} candidates with no prime found. Check the random number generator.")
