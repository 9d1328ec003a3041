"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from megavolatility import nets
from megavolatility.util import helpers


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def registry():
    """A fresh registry with the built-in networks, so tests can't leak."""
    return nets.newRegistry()


@pytest.fixture
def customConfig():
    return dict(
        name="customnet",
        alias="mynet",
        pubkeyhash=0x10,
        privatekey=0x90,
        scripthash=0x08,
        extPublicKeyVersion=0x0278B20E,
        extPrivateKeyVersion=0x0278ADE4,
        magicBytes=0xE7BEB4D4,
        port=20001,
        dnsSeeds=["localhost", "mynet.localhost"],
    )
