"""
Copyright (c) 2020, The Decred developers

This example script prints the network an address, WIF private key or extended
key belongs to.

$ python detect_network.py mrX9vMRYLfVy1BnZbc5gZjuyaqH3ZW2ZHz
"""

import sys

from megavolatility import MgvError, addrlib, nets


def detect(registry, s):
    if s[1:4] in ("pub", "prv"):
        net, isPrivate = addrlib.extendedKeyNetwork(registry, s)
        return net, "extended private key" if isPrivate else "extended public key"
    try:
        return addrlib.wifNetwork(registry, s), "WIF private key"
    except MgvError:
        net, isP2SH = addrlib.decodeAddress(registry, s)
        return net, "P2SH address" if isP2SH else "P2PKH address"


def main():
    registry = nets.newRegistry()
    for s in sys.argv[1:]:
        net, kind = detect(registry, s)
        print(f"{s}: {kind} on {net} (port {net.port}, magic {net.magicBytes.hex()})")


if __name__ == "__main__":
    main()
