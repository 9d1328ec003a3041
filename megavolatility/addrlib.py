"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Network detection for Base58Check encoded addresses, WIF private keys and
serialized extended keys. The version bytes of the decoded data are resolved
against a NetworkRegistry, restricted to the fields the version can come from.
"""

from typing import Tuple, Union

from base58 import b58decode_check, b58encode_check

from megavolatility import InvalidArgument, UnknownNetwork
from megavolatility.nets import Network, NetworkRegistry
from megavolatility.util.encode import UINT32_SIZE, uint32FromBytes


RIPEMD160_SIZE = 20
PrivKeyBytesLen = 32
compressMagic = 0x01

# version(4) || depth(1) || parent fingerprint(4) || child number(4) ||
# chain code(32) || key data(33)
SERIALIZED_KEY_LENGTH = 78

ADDRESS_KEYS = ("pubkeyhash", "scripthash")
EXTENDED_KEY_KEYS = ("extPublicKeyVersion", "extPrivateKeyVersion")


def b58CheckDecode(s: str) -> bytes:
    """
    Decode the Base58Check string and verify its checksum.

    Args:
        s: The encoded string.

    Returns:
        The decoded payload, without the checksum.
    """
    try:
        return b58decode_check(s)
    except ValueError as e:
        raise InvalidArgument(f"invalid Base58Check encoding: {e}") from e


def encodeAddress(
    hash160: Union[bytes, bytearray], net: Network, scriptHash: bool = False
) -> str:
    """
    Base-58 encode the hash, with the network's address version prepended.

    Args:
        hash160: The 20-byte pubkey hash or script hash.
        net: The network.
        scriptHash: Use the script-hash version instead of the pubkey-hash
            version.

    Returns:
        The Base58Check encoded address.
    """
    if len(hash160) != RIPEMD160_SIZE:
        raise InvalidArgument(f"incorrect hash length {len(hash160)}")
    netID = net.scripthash if scriptHash else net.pubkeyhash
    if netID is None:
        raise InvalidArgument(f"network {net} has no address version for this type")
    return b58encode_check(bytes([netID]) + bytes(hash160)).decode()


def decodeAddress(registry: NetworkRegistry, addr: str) -> Tuple[Network, bool]:
    """
    Find the network of a Base58Check encoded P2PKH or P2SH address.

    Args:
        registry: The networks to search.
        addr: The encoded address.

    Returns:
        The network, and whether the address is a script-hash address.
    """
    decoded = b58CheckDecode(addr)
    if len(decoded) != 1 + RIPEMD160_SIZE:
        raise InvalidArgument(f"decoded address is of unknown size {len(decoded) - 1}")
    netID = decoded[0]
    net = registry.get(netID, ADDRESS_KEYS)
    if net is None:
        raise UnknownNetwork(f"unknown address version {netID:#04x}")
    isP2PKH = net.pubkeyhash == netID
    isP2SH = net.scripthash == netID
    if isP2PKH and isP2SH:
        raise InvalidArgument("address collision")
    return net, isP2SH


def addressNetwork(registry: NetworkRegistry, addr: str) -> Network:
    """
    Args:
        registry: The networks to search.
        addr: The encoded address.

    Returns:
        The network the address belongs to.
    """
    return decodeAddress(registry, addr)[0]


def isScriptHashAddress(registry: NetworkRegistry, addr: str) -> bool:
    """
    Args:
        registry: The networks to search.
        addr: The encoded address.

    Returns:
        True for a P2SH address, False for a P2PKH address.
    """
    return decodeAddress(registry, addr)[1]


def wifNetwork(registry: NetworkRegistry, wif: str) -> Network:
    """
    Find the network of a WIF-encoded private key.

    Args:
        registry: The networks to search.
        wif: The WIF string.

    Returns:
        The network the private key belongs to.
    """
    decoded = b58CheckDecode(wif)
    # Length of base58 decoded WIF must be 1 byte for the netID plus 32 bytes,
    # plus an optional 1 byte (0x01) if compressed.
    decodedLen = len(decoded)
    if decodedLen == 1 + PrivKeyBytesLen + 1:
        if decoded[-1] != compressMagic:
            raise InvalidArgument("malformed 34-byte private key")
    elif decodedLen != 1 + PrivKeyBytesLen:
        raise InvalidArgument("malformed private key")
    netID = decoded[0]
    net = registry.get(netID, "privatekey")
    if net is None:
        raise UnknownNetwork(f"unknown private key version {netID:#04x}")
    return net


def extendedKeyNetwork(registry: NetworkRegistry, key: str) -> Tuple[Network, bool]:
    """
    Find the network of a serialized extended key from its version bytes.

    Args:
        registry: The networks to search.
        key: The Base58Check encoded extended key.

    Returns:
        The network, and whether the key is a private key.
    """
    decoded = b58CheckDecode(key)
    if len(decoded) != SERIALIZED_KEY_LENGTH:
        raise InvalidArgument(
            f"extended key must be {SERIALIZED_KEY_LENGTH} bytes, got {len(decoded)}"
        )
    version = uint32FromBytes(decoded[:UINT32_SIZE])
    net = registry.get(version, EXTENDED_KEY_KEYS)
    if net is None:
        raise UnknownNetwork(f"unknown extended key version {version:#010x}")
    return net, net.extPrivateKeyVersion == version
