"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

The Network descriptor. A Network is a read-only record of the magics and
connection parameters that identify one chain.
"""

from collections import namedtuple
from collections.abc import Mapping

from megavolatility import InvalidArgument
from megavolatility.util.encode import uint32ToBytes


"""
NetConfig is the part of a Network that can change with the network mode. The
test network carries two of them, and which one is exposed depends on whether
alternate (regtest) mode is enabled.
"""
NetConfig = namedtuple("NetConfig", ["port", "magicBytes", "dnsSeeds"])

"""The configuration fields recognized by Network and NetworkRegistry.add."""
FIELDS = (
    "name",
    "alias",
    "pubkeyhash",
    "privatekey",
    "scripthash",
    "extPublicKeyVersion",
    "extPrivateKeyVersion",
    "magicBytes",
    "port",
    "dnsSeeds",
)

MAX_UINT32 = (1 << 32) - 1
MAX_PORT = (1 << 16) - 1


def checkInt(field, v, maxVal):
    """
    Check that an optional integer field is in the range [0, maxVal].

    Args:
        field (str): The field name, for error messages.
        v (int or None): The value.
        maxVal (int): The largest allowed value.

    Returns:
        int or None: The value.
    """
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidArgument(f"{field} must be an integer, got {type(v).__name__}")
    if v < 0 or v > maxVal:
        raise InvalidArgument(f"{field} {v} is out of range [0, {maxVal}]")
    return v


def makeNetConfig(port=None, magicBytes=None, dnsSeeds=None):
    """
    Validate and normalize the mode-dependent parameters.

    Args:
        port (int): optional. The default peer port.
        magicBytes (int or bytes-like): optional. The network magic. Integers
            are encoded as 4 big-endian bytes.
        dnsSeeds (iterable(str)): optional. The DNS seed hostnames.

    Returns:
        NetConfig: The normalized parameters.
    """
    if magicBytes is not None:
        magicBytes = uint32ToBytes(magicBytes)
    if dnsSeeds is not None:
        if isinstance(dnsSeeds, (str, bytes)) or not hasattr(dnsSeeds, "__iter__"):
            raise InvalidArgument("dnsSeeds must be a sequence of hostnames")
        dnsSeeds = tuple(dnsSeeds)
        for seed in dnsSeeds:
            if not isinstance(seed, str):
                raise InvalidArgument(f"DNS seed {seed!r} is not a string")
    return NetConfig(
        port=checkInt("port", port, MAX_PORT), magicBytes=magicBytes, dnsSeeds=dnsSeeds
    )


class Network:
    """
    Network holds the version bytes and connection parameters of a single
    chain. Every field is read-only. The only mutable state is the alternate
    mode flag, which is only meaningful for a Network created with an
    alternate NetConfig.
    """

    __slots__ = (
        "_name",
        "_alias",
        "_pubkeyhash",
        "_privatekey",
        "_scripthash",
        "_extPublicKeyVersion",
        "_extPrivateKeyVersion",
        "_primary",
        "_alternate",
        "_alternateModeEnabled",
    )

    def __init__(
        self,
        name,
        alias=None,
        pubkeyhash=None,
        privatekey=None,
        scripthash=None,
        extPublicKeyVersion=None,
        extPrivateKeyVersion=None,
        magicBytes=None,
        port=None,
        dnsSeeds=None,
        alternate=None,
    ):
        """
        Args:
            name (str): The unique network name.
            alias (str): optional. A second unique name.
            pubkeyhash (int): optional. The pubkey-hash address version byte.
            privatekey (int): optional. The WIF private key version byte.
            scripthash (int): optional. The script-hash address version byte.
            extPublicKeyVersion (int): optional. The 4-byte extended public
                key version.
            extPrivateKeyVersion (int): optional. The 4-byte extended private
                key version.
            magicBytes (int or bytes-like): optional. The wire network magic.
            port (int): optional. The default peer port.
            dnsSeeds (iterable(str)): optional. DNS seed hostnames.
            alternate (NetConfig or dict): optional. The port, magicBytes and
                dnsSeeds to use when alternate mode is enabled.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgument(f"network name must be a non-empty string, got {name!r}")
        if alias is not None and not isinstance(alias, str):
            raise InvalidArgument(f"network alias must be a string, got {alias!r}")
        if isinstance(alternate, NetConfig):
            alternate = makeNetConfig(*alternate)
        elif isinstance(alternate, Mapping):
            alternate = makeNetConfig(**alternate)
        elif alternate is not None:
            raise InvalidArgument("alternate parameters must be a NetConfig or a mapping")
        self._name = name
        self._alias = alias
        self._pubkeyhash = checkInt("pubkeyhash", pubkeyhash, 0xFF)
        self._privatekey = checkInt("privatekey", privatekey, 0xFF)
        self._scripthash = checkInt("scripthash", scripthash, 0xFF)
        self._extPublicKeyVersion = checkInt(
            "extPublicKeyVersion", extPublicKeyVersion, MAX_UINT32
        )
        self._extPrivateKeyVersion = checkInt(
            "extPrivateKeyVersion", extPrivateKeyVersion, MAX_UINT32
        )
        self._primary = makeNetConfig(port, magicBytes, dnsSeeds)
        self._alternate = alternate
        self._alternateModeEnabled = False

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Network({self._name})"

    @property
    def name(self):
        return self._name

    @property
    def alias(self):
        return self._alias

    @property
    def pubkeyhash(self):
        return self._pubkeyhash

    @property
    def privatekey(self):
        return self._privatekey

    @property
    def scripthash(self):
        return self._scripthash

    @property
    def extPublicKeyVersion(self):
        return self._extPublicKeyVersion

    @property
    def extPrivateKeyVersion(self):
        return self._extPrivateKeyVersion

    def netConfig(self):
        """
        The mode-dependent parameters currently in effect.

        Returns:
            NetConfig: The alternate parameters if alternate mode is enabled,
                else the primary parameters.
        """
        if self._alternateModeEnabled and self._alternate:
            return self._alternate
        return self._primary

    @property
    def port(self):
        return self.netConfig().port

    @property
    def magicBytes(self):
        return self.netConfig().magicBytes

    @property
    def dnsSeeds(self):
        return self.netConfig().dnsSeeds

    @property
    def hasAlternate(self):
        """True if the Network was created with alternate parameters."""
        return self._alternate is not None

    @property
    def alternateModeEnabled(self):
        return self._alternateModeEnabled

    def _setAlternateMode(self, enabled):
        """
        Switch between the primary and alternate parameters. Only the
        NetworkRegistry calls this, while holding its lock.

        Args:
            enabled (bool): Whether alternate mode should be on.
        """
        if enabled and self._alternate is None:
            raise InvalidArgument(f"network {self._name} has no alternate parameters")
        self._alternateModeEnabled = bool(enabled)

    def indexKeys(self):
        """
        The values a registry should resolve to this Network. Absent values and
        composite values are skipped. The magic and port of both modes are
        included, so lookups don't depend on the mode in effect.

        Returns:
            list: The lookup keys, without duplicates, in field order.
        """
        keys = [
            self._name,
            self._alias,
            self._pubkeyhash,
            self._privatekey,
            self._scripthash,
            self._extPublicKeyVersion,
            self._extPrivateKeyVersion,
            self._primary.magicBytes,
            self._primary.port,
        ]
        if self._alternate:
            keys += [self._alternate.magicBytes, self._alternate.port]
        uniq = []
        for k in keys:
            if k is not None and k not in uniq:
                uniq.append(k)
        return uniq
