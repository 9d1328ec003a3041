"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

from base58 import b58decode_check, b58encode_check
import pytest

from megavolatility import InvalidArgument, UnknownNetwork
from megavolatility import addrlib


XPUB = (
    "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29ESFjqJoCu1Rupj"
    "e8YtGqsefD265TMg7usUDFdp6W1EGMcet8"
)
XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6"
    "LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)
TPUB = (
    "tpubD6NzVbkrYhZ4WZaiWHz59q5EQ61bd6dUYfU4ggRWAtNAyyYRNWT6ktJ7UHJEXURvTfTfskFQm"
    "K7Ff4FRkiRN5wQH8nkGAb6aKB4Yyeqsw5m"
)


def test_addresses(registry):
    """
    Tests are 4-tuples:

    addr (str): The encoded address.
    hash160 (str): The hex-encoded pubkey hash or script hash.
    net (str): The expected network name.
    scriptHash (bool): Whether the address is P2SH.
    """
    tests = [
        ("1MirQ9bwyQcGVJPwKUgapu5ouK2E2Ey4gX", "e34cce70c86373273efcc54ce7d2a491bb4a0e84", "livenet", False),
        ("12MzCDwodF9G1e7jfwLXfR164RNtx4BRVG", "0ef030107fd26e0b6bf40512bca2ceb1dd80adaa", "livenet", False),
        ("mrX9vMRYLfVy1BnZbc5gZjuyaqH3ZW2ZHz", "78b316a08647d5b77283e512d3603f1f1c8de68f", "testnet", False),
        ("3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC", "f815b036d9bbbce5e9f2a00abd1bf3dc91e95510", "livenet", True),
        ("3NukJ6fYZJ5Kk8bPjycAnruZkE5Q7UW7i8", "e8c300c87986efa84c37c0519929019ef86eb5b4", "livenet", True),
        ("2NBFNJTktNa7GZusGbDbGKRZTxdK9VVez3n", "c579342c2c4c9220205e2cdc285617040c924a0a", "testnet", True),
    ]
    for addr, hash160, netName, scriptHash in tests:
        net = registry.get(netName)
        assert addrlib.addressNetwork(registry, addr) is net, addr
        assert addrlib.isScriptHashAddress(registry, addr) is scriptHash, addr
        assert addrlib.encodeAddress(bytes.fromhex(hash160), net, scriptHash) == addr

    # The network is found in regtest mode too.
    registry.enableAlternateMode()
    assert addrlib.addressNetwork(registry, "mrX9vMRYLfVy1BnZbc5gZjuyaqH3ZW2ZHz") is registry.testnet


def test_custom_address(registry, customConfig):
    custom = registry.add(customConfig)
    hash160 = bytes(range(20))
    addr = addrlib.encodeAddress(hash160, custom)
    assert b58decode_check(addr) == bytes([0x10]) + hash160
    assert addrlib.addressNetwork(registry, addr) is custom
    p2sh = addrlib.encodeAddress(hash160, custom, scriptHash=True)
    assert addrlib.decodeAddress(registry, p2sh) == (custom, True)

    registry.remove(custom)
    with pytest.raises(UnknownNetwork):
        addrlib.addressNetwork(registry, addr)

    # The privatekey byte of a network is not an address version.
    addr = b58encode_check(bytes([0x80]) + hash160).decode()
    with pytest.raises(UnknownNetwork):
        addrlib.addressNetwork(registry, addr)


def test_address_collision(registry):
    net = registry.add(dict(name="samenet", pubkeyhash=0x22, scripthash=0x22))
    addr = addrlib.encodeAddress(bytes(20), net)
    with pytest.raises(InvalidArgument):
        addrlib.decodeAddress(registry, addr)


def test_bad_addresses(registry):
    with pytest.raises(InvalidArgument):
        # bad checksum
        addrlib.addressNetwork(registry, "1MirQ9bwyQcGVJPwKUgapu5ouK2E2Ey4gY")
    with pytest.raises(InvalidArgument):
        # wrong hash length
        addrlib.addressNetwork(registry, b58encode_check(bytes(20)).decode())
    with pytest.raises(InvalidArgument):
        addrlib.encodeAddress(bytes(19), registry.livenet)
    with pytest.raises(InvalidArgument):
        addrlib.encodeAddress(bytes(20), registry.add(dict(name="noaddrs")))


def test_wif(registry):
    assert (
        addrlib.wifNetwork(registry, "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ")
        is registry.livenet
    )
    assert (
        addrlib.wifNetwork(registry, "cV1Y7ARUr9Yx7BR55nTdnR7ZXNJphZtCCMBTEZBJe1hXt2kB684q")
        is registry.testnet
    )

    key = bytes(range(1, 33))
    custom = registry.add(dict(name="wifnet", privatekey=0x91))
    assert addrlib.wifNetwork(registry, b58encode_check(bytes([0x91]) + key).decode()) is custom
    compressed = b58encode_check(bytes([0x91]) + key + b"\x01").decode()
    assert addrlib.wifNetwork(registry, compressed) is custom

    with pytest.raises(UnknownNetwork):
        addrlib.wifNetwork(registry, b58encode_check(bytes([0x92]) + key).decode())

    tests = [
        # invalid length
        "deadbeef",
        # invalid compress magic
        "KwDiBf89QgGbjEhKnhXJuH7LrciVrZi3qYjgd9M7rFU73sfZr2ym",
        # invalid checksum
        "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTj",
    ]
    for wif in tests:
        with pytest.raises(InvalidArgument):
            addrlib.wifNetwork(registry, wif)


def test_extended_keys(registry):
    assert addrlib.extendedKeyNetwork(registry, XPUB) == (registry.livenet, False)
    assert addrlib.extendedKeyNetwork(registry, XPRV) == (registry.livenet, True)
    assert addrlib.extendedKeyNetwork(registry, TPUB) == (registry.testnet, False)

    # Swapping in the testnet private version yields a testnet private key.
    payload = b58decode_check(XPRV)
    tprv = b58encode_check((0x04358394).to_bytes(4, "big") + payload[4:]).decode()
    assert addrlib.extendedKeyNetwork(registry, tprv) == (registry.testnet, True)

    unknown = b58encode_check((0x01020304).to_bytes(4, "big") + payload[4:]).decode()
    with pytest.raises(UnknownNetwork):
        addrlib.extendedKeyNetwork(registry, unknown)

    with pytest.raises(InvalidArgument):
        addrlib.extendedKeyNetwork(registry, b58encode_check(payload[:-1]).decode())
    with pytest.raises(InvalidArgument):
        addrlib.extendedKeyNetwork(registry, XPUB[:-1] + "9")
