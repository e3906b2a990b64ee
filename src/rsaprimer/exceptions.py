"""Failure signals for the bounded generation loops.

Every loop in key generation retries silently on an invalid intermediate state. These exceptions only surface once a
loop runs an improbable number of times, which in practice points at a broken random number generator.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAPrimerError(RuntimeError):
    """Base class for all errors raised by rsaprimer."""


class PrimeGenerationFailed(RSAPrimerError):
    """No prime was accepted within the allowed number of sampled candidates."""


class KeyGenerationExhausted(RSAPrimerError):
    """The key construction loop ran out of attempts without producing a valid key."""


class KeyValidationFailed(RSAPrimerError):
    """A key does not satisfy the RSA invariants.

    Attributes:
        reason: Short description of the violated invariant.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Key validation failed: {reason}")
        self.reason = reason
