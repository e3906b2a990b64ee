"""Textbook RSA from first principles.

Provides probabilistic primality screening, random prime sampling, extended-Euclid modular inverses and a validated
key generation loop, plus the raw RSA encryption/decryption primitive. No padding, no serialization and no constant
time arithmetic: an academic tool, not a production one.

Typical usage example:

    pair = RSAKeyPair.new(512)
    c = pair.encrypt(42)
    m = pair.decrypt(c)
    key = generate(8)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rsaprimer.euclid import extended_gcd
from rsaprimer.euclid import gcd
from rsaprimer.euclid import modular_inverse
from rsaprimer.exceptions import KeyGenerationExhausted
from rsaprimer.exceptions import KeyValidationFailed
from rsaprimer.exceptions import PrimeGenerationFailed
from rsaprimer.exceptions import RSAPrimerError
from rsaprimer.keygen import check_key
from rsaprimer.keygen import generate
from rsaprimer.keygen import generate_key_pair
from rsaprimer.keygen import Key
from rsaprimer.keygen import validate_key
from rsaprimer.keypair import RSAKeyPair
from rsaprimer.primes import is_prime
from rsaprimer.primes import random_prime
from rsaprimer.rsa import RSAPrivKey
from rsaprimer.rsa import RSAPubKey

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Key",
    "RSAKeyPair",
    "RSAPrivKey",
    "RSAPubKey",
    "RSAPrimerError",
    "PrimeGenerationFailed",
    "KeyGenerationExhausted",
    "KeyValidationFailed",
    "is_prime",
    "random_prime",
    "gcd",
    "extended_gcd",
    "modular_inverse",
    "generate",
    "generate_key_pair",
    "check_key",
    "validate_key",
]
