"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

The network registry. A NetworkRegistry resolves a Network from any of its
scalar parameters, so a version byte read from serialized data is enough to
tell which chain the data belongs to.
"""

from collections.abc import Mapping
import threading

from megavolatility import DuplicateNetworkKey, InvalidArgument, UnknownNetwork
from megavolatility.util import helpers

from . import livenet, regtest, testnet
from .network import FIELDS, NetConfig, Network, makeNetConfig  # noqa: F401


log = helpers.getLogger("NETS")


def normalizeName(netName):
    """
    Remove the numerals from testnet.

    Args:
        netName (string): The raw network name.

    Returns:
        string: The network name with numerals stripped.
    """
    return "testnet" if "testnet" in netName else netName


def paramsConfig(params):
    """
    The NetworkRegistry.add configuration for a network parameters module.

    Args:
        params (module): A network parameters module, e.g. nets.livenet.

    Returns:
        dict: The configuration.
    """
    return dict(
        name=params.Name,
        alias=params.Alias,
        pubkeyhash=params.PubKeyHashAddrID,
        privatekey=params.PrivateKeyID,
        scripthash=params.ScriptHashAddrID,
        extPublicKeyVersion=params.HDPublicKeyID,
        extPrivateKeyVersion=params.HDPrivateKeyID,
        magicBytes=params.NetworkMagic,
        port=params.DefaultPort,
        dnsSeeds=params.DNSSeeds,
    )


class NetworkRegistry:
    """
    NetworkRegistry is an ordered collection of Networks with a reverse index
    from every scalar parameter value to the Network that owns it. Values must
    be unique across the whole registry, because a bare value like 0x6f doesn't
    say which field it came from.

    All methods hold the registry lock, so a registry can be shared between
    threads.
    """

    def __init__(self):
        self.networks = []
        self.index = {}
        self.lock = threading.RLock()
        self.testnetName = None

    def __len__(self):
        with self.lock:
            return len(self.networks)

    def __iter__(self):
        with self.lock:
            return iter(list(self.networks))

    def __contains__(self, net):
        with self.lock:
            return any(n is net for n in self.networks)

    def add(self, data, alternate=None):
        """
        Create and register a Network.

        Args:
            data (Mapping): The network configuration. Recognized keys are
                name, alias, pubkeyhash, privatekey, scripthash,
                extPublicKeyVersion, extPrivateKeyVersion, magicBytes, port and
                dnsSeeds. Only name is required.
            alternate (NetConfig or dict): optional. The port, magicBytes and
                dnsSeeds used while alternate mode is enabled.

        Returns:
            Network: The new Network.

        Raises:
            InvalidArgument: The configuration is not a mapping, or a value is
                invalid.
            DuplicateNetworkKey: A value is already a lookup key of another
                network. Nothing is registered in that case.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument(
                f"network configuration must be a mapping, got {type(data).__name__}"
            )
        if data.get("name") is None:
            raise InvalidArgument("network configuration has no name")
        unknown = [k for k in data if k not in FIELDS]
        if unknown:
            log.warning(f"ignoring unknown network fields {unknown}")
        net = Network(
            alternate=alternate, **{k: v for k, v in data.items() if k in FIELDS}
        )
        keys = net.indexKeys()
        with self.lock:
            for k in keys:
                owner = self.index.get(k)
                if owner is not None:
                    raise DuplicateNetworkKey(k, owner)
            for k in keys:
                self.index[k] = net
            self.networks.append(net)
        log.debug(f"added network {net.name} with {len(keys)} lookup keys")
        return net

    def get(self, arg, keys=None):
        """
        Retrieve the Network associated with a magic number or string.

        Args:
            arg (Network, str, int or bytes-like): The value to look up. A
                registered Network is returned as is.
            keys (str or iterable(str)): optional. If set, only Networks whose
                value for one of these fields equals arg will match.

        Returns:
            Network or None: The matching Network, or None if there is none.
                Values of a type no Network field holds, such as bools and
                floats, never match.
        """
        if arg is None or isinstance(arg, bool):
            return None
        with self.lock:
            if any(n is arg for n in self.networks):
                return arg
            if isinstance(arg, bytearray):
                arg = bytes(arg)
            # Only the types a Network stores can match. 0.0 == 0 would
            # otherwise resolve a float to a version byte.
            if not isinstance(arg, (int, str, bytes)):
                return None
            if keys is not None:
                if isinstance(keys, str):
                    keys = [keys]
                keys = [k for k in keys if k in FIELDS]
                for net in self.networks:
                    if any(getattr(net, k) == arg for k in keys):
                        return net
                return None
            return self.index.get(arg)

    def parse(self, name):
        """
        Get the Network by name or alias.

        Args:
            name (str): The network name or alias. "testnet3" style names are
                normalized first.

        Returns:
            Network: The Network.

        Raises:
            UnknownNetwork: No Network has that name or alias.
        """
        if isinstance(name, str):
            net = self.get(name, ("name", "alias"))
            if net is None:
                net = self.get(normalizeName(name), ("name", "alias"))
            if net is not None:
                return net
        raise UnknownNetwork(f"unrecognized network name {name}")

    def remove(self, net):
        """
        Unregister the Network. Unregistered Networks are ignored.

        Args:
            net (Network): The Network to remove.
        """
        with self.lock:
            before = len(self.networks)
            self.networks = [n for n in self.networks if n is not net]
            if len(self.networks) == before:
                return
            for k in [k for k, v in self.index.items() if v is net]:
                del self.index[k]
            if self.testnetName == net.name:
                self.testnetName = None
        log.debug(f"removed network {net.name}")

    @property
    def livenet(self):
        return self.get(livenet.Name, "name")

    mainnet = livenet

    @property
    def defaultNetwork(self):
        return self.livenet

    @property
    def testnet(self):
        """
        The designated test network, i.e. the one that is switched by
        enableAlternateMode and disableAlternateMode.
        """
        with self.lock:
            if self.testnetName is None:
                return None
            return self.get(self.testnetName, "name")

    def setTestnet(self, net):
        """
        Designate the test network.

        Args:
            net (Network): A registered Network with alternate parameters.
        """
        with self.lock:
            if net not in self:
                raise InvalidArgument(f"network {net} is not registered")
            if not net.hasAlternate:
                raise InvalidArgument(f"network {net} has no alternate parameters")
            self.testnetName = net.name

    def setAlternateMode(self, enabled):
        """
        Switch the test network between its primary and alternate parameters.
        The index is not touched, since both parameter sets are indexed when
        the network is added.

        Args:
            enabled (bool): Whether alternate mode should be on.
        """
        with self.lock:
            net = self.testnet
            if net is None:
                raise UnknownNetwork("no test network is designated")
            net._setAlternateMode(enabled)
        log.debug(f"{net.name} alternate mode {'enabled' if enabled else 'disabled'}")

    def enableAlternateMode(self):
        """
        Enable regtest parameters for the test network.
        """
        self.setAlternateMode(True)

    def disableAlternateMode(self):
        """
        Disable regtest parameters for the test network.
        """
        self.setAlternateMode(False)

    enableRegtest = enableAlternateMode
    disableRegtest = disableAlternateMode


def newRegistry():
    """
    Create a NetworkRegistry holding the built-in networks, livenet (alias
    mainnet) and testnet (alias regtest). The testnet is the designated test
    network and uses the regtest parameters in alternate mode.

    Returns:
        NetworkRegistry: The registry.
    """
    registry = NetworkRegistry()
    registry.add(paramsConfig(livenet))
    tnet = registry.add(
        paramsConfig(testnet),
        alternate=makeNetConfig(
            port=regtest.DefaultPort,
            magicBytes=regtest.NetworkMagic,
            dnsSeeds=regtest.DNSSeeds,
        ),
    )
    registry.setTestnet(tnet)
    return registry

