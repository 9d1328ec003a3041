"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, the Decred developers
See LICENSE for details

Integer and byte codecs for the network parameters.
"""

from megavolatility import InvalidArgument


# Byte length of wire magics and extended key versions.
UINT32_SIZE = 4


def intFromBytes(b, signed=False):
    """
    Decodes an integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def uint32ToBytes(v):
    """
    Encode a 32-bit unsigned value as exactly 4 big-endian bytes. Byte strings
    are accepted as-is when they already have the right length.

    Args:
        v (int or bytes-like): The value.

    Returns:
        bytes: The 4 bytes.
    """
    if isinstance(v, (bytes, bytearray)):
        if len(v) != UINT32_SIZE:
            raise InvalidArgument(
                f"expected {UINT32_SIZE} bytes, got {len(v)}: {bytes(v).hex()}"
            )
        return bytes(v)
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidArgument(f"cannot encode {type(v).__name__} as uint32")
    try:
        return v.to_bytes(UINT32_SIZE, byteorder="big")
    except OverflowError as e:
        raise InvalidArgument(f"{v} is out of range for uint32") from e


def uint32FromBytes(b):
    """
    Decode 4 big-endian bytes as an unsigned integer.

    Args:
        b (bytes-like): The encoded value. Must be 4 bytes.

    Returns:
        int: The decoded integer.
    """
    if len(b) != UINT32_SIZE:
        raise InvalidArgument(f"expected {UINT32_SIZE} bytes, got {len(b)}")
    return intFromBytes(b)
