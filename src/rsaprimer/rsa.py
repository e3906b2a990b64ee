"""Provides the raw RSA primitive.

Facilitates core RSA solely under "textbook" conditions: encryption is m**e mod n and decryption is c**d mod n, with
no padding and no range checks on the message representative. Deterministic and malleable, so never use it directly
on real data.

Typical usage example:

    pub = RSAPubKey(3233, 17)
    priv = RSAPrivKey(3233, 2753)
    c = pub.encrypt(65)
    m = priv.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAKey:
    """The overall RSA key class implementation.

    Acts mostly as a template for the "core" components of a RSA Key that are strictly mandatory in both a public
    and a private key. Attributes are fixed at construction.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """

    __slots__ = ("mod", "expo")

    def __init__(self, mod: int, expo: int) -> None:
        object.__setattr__(self, "mod", mod)
        object.__setattr__(self, "expo", expo)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation. (Encrypt/Decrypt)

        Keeping `message` inside [0, mod) is the caller's responsibility.

        Args:
            message: The int-marshalled message.

        Returns:
            message**expo mod mod.
        """
        return pow(message, self.expo, self.mod)

    def as_tuple(self) -> tuple[int, int]:
        """The key as a (modulus, exponent) pair."""
        return self.mod, self.expo

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.mod, self.expo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mod={self.mod}, expo={self.expo})"


class RSAPubKey(RSAKey):
    """Public half of a key pair, (n, e)."""

    __slots__ = ()

    def encrypt(self, message: int) -> int:
        """Encrypts the message representative: message**e mod n."""
        return self.c_rsa(message)


class RSAPrivKey(RSAKey):
    """Private half of a key pair, (n, d)."""

    __slots__ = ()

    def decrypt(self, ciphertext: int) -> int:
        """Decrypts the ciphertext representative: ciphertext**d mod n."""
        return self.c_rsa(ciphertext)
