"""The RSA key pair handle.

Owns one validated `Key` and hands out its public and private halves by value.

Typical usage example:

    pair = RSAKeyPair.new(512)
    n, e = pair.public_key()
    c = pair.encrypt(42)
    m = pair.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random

from rsaprimer import keygen
from rsaprimer.rsa import RSAPrivKey
from rsaprimer.rsa import RSAPubKey


class RSAKeyPair:
    """An immutable RSA key pair.

    Attributes:
        key: The owned key.
        pub: The public key (n, e). Read-only.
        priv: The private key (n, d). Read-only.
    """

    __slots__ = ("_key", "_pub", "_priv")

    def __init__(self, key: keygen.Key) -> None:
        """Wraps an existing key.

        Args:
            key: A key produced by `keygen.generate()`. Validated again here.

        Raises:
            KeyValidationFailed: If `key` violates the RSA invariants.
        """
        keygen.validate_key(key)
        self._key = key
        self._pub = RSAPubKey(key.n, key.e)
        self._priv = RSAPrivKey(key.n, key.d)

    @classmethod
    def new(cls, bits: int = keygen.DEFAULT_KEY_SIZE, rng: random.Random | None = None) -> "RSAKeyPair":
        """Generates a fresh, validated key pair.

        Args:
            bits: Bit length of the modulus. Must be even and >= `keygen.MIN_KEY_SIZE`.
            rng: Random source. Defaults to the system random source.

        Returns:
            A new key pair.
        """
        return cls(keygen.generate(bits, rng))

    @property
    def key(self) -> keygen.Key:
        return self._key

    @property
    def bits(self) -> int:
        return self._key.bits

    @property
    def pub(self) -> RSAPubKey:
        return self._pub

    @property
    def priv(self) -> RSAPrivKey:
        return self._priv

    def public_key(self) -> tuple[int, int]:
        """(modulus, public exponent)."""
        return self.pub.as_tuple()

    def private_key(self) -> tuple[int, int]:
        """(modulus, private exponent)."""
        return self.priv.as_tuple()

    def encrypt(self, message: int) -> int:
        return self.pub.encrypt(message)

    def decrypt(self, ciphertext: int) -> int:
        return self.priv.decrypt(ciphertext)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAKeyPair):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"RSAKeyPair(bits={self.bits}, n={self._key.n}, e={self._key.e})"
