# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from rsaprimer import __main__ as cli
from rsaprimer import keygen
from rsaprimer.keypair import RSAKeyPair

TEXTBOOK_PAIR = RSAKeyPair(keygen.Key(61, 53, 3233, 17, 2753))


@pytest.fixture
def textbook(mocker):
    return mocker.patch("rsaprimer.RSAKeyPair.new", return_value=TEXTBOOK_PAIR)


def test_keygen_non_interactive(textbook, capsys):
    assert cli.main(["-n", "--bits", "12"]) == 0
    textbook.assert_called_once_with(12)
    out = capsys.readouterr().out
    assert "n: 3233" in out
    assert "e: 17" in out
    assert "d: 2753" in out
    assert "p: " not in out


def test_keygen_default_bits(textbook):
    cli.main(["-n"])
    textbook.assert_called_once_with(keygen.DEFAULT_KEY_SIZE)


def test_show_primes(textbook, capsys):
    cli.main(["-n", "--bits", "12", "--show-primes"])
    out = capsys.readouterr().out
    assert "p: 61" in out
    assert "q: 53" in out


def test_message_roundtrip(textbook, capsys):
    with pytest.warns(RuntimeWarning, match="Textbook RSA is unsecure!"):
        assert cli.main(["-n", "--bits", "12", "--message", "65"]) == 0
    out = capsys.readouterr().out
    assert "ciphertext: 2790" in out
    assert "decrypted: 65" in out


def test_message_out_of_range(textbook, capsys):
    with pytest.warns(RuntimeWarning):
        assert cli.main(["-n", "--bits", "12", "--message", "3233"]) == 2
    assert "Message must be in range [0, 3232]" in capsys.readouterr().out


@pytest.mark.parametrize("bits", ["7", "6", "abc", "-8"])
def test_bits_validated(bits):
    with pytest.raises(SystemExit) as info:
        cli.main(["-n", "--bits", bits])
    assert info.value.code == 2


def test_interactive_bits(textbook, mocker):
    mocker.patch("builtins.input", side_effect=["abc", "9", "12"])
    cli.main([])
    textbook.assert_called_once_with(12)


def test_interactive_default(textbook, mocker):
    mocker.patch("builtins.input", return_value="")
    cli.main([])
    textbook.assert_called_once_with(keygen.DEFAULT_KEY_SIZE)


def test_real_smallest_key(capsys):
    assert cli.main(["-n", "--bits", "8", "--show-primes", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "bits: 8" in out


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert "rsaprimer" in capsys.readouterr().out
