"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from megavolatility import InvalidArgument
from megavolatility.util import encode


def test_intFromBytes():
    assert encode.intFromBytes(b"") == 0
    assert encode.intFromBytes(b"\x01\x00") == 256
    assert encode.intFromBytes(b"\xff", signed=True) == -1


def test_uint32():
    assert encode.uint32ToBytes(0xF9BEB4D9) == bytes.fromhex("f9beb4d9")
    assert encode.uint32ToBytes(0) == bytes(4)
    assert encode.uint32ToBytes(1) == bytes([0, 0, 0, 1])
    assert encode.uint32ToBytes(bytearray(b"\x01\x02\x03\x04")) == b"\x01\x02\x03\x04"
    assert isinstance(encode.uint32ToBytes(bytearray(4)), bytes)
    assert encode.uint32FromBytes(bytes.fromhex("0488b21e")) == 0x0488B21E

    for v in (1 << 32, -1, b"\x01", bytes(5), "f9beb4d9", 1.0, True, None):
        with pytest.raises(InvalidArgument):
            encode.uint32ToBytes(v)
    with pytest.raises(InvalidArgument):
        encode.uint32FromBytes(b"\x01\x02")
