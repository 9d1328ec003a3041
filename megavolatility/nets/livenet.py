"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

livenet holds the main network parameters. The address and extended key
magics are shared with Bitcoin's mainnet so that existing tooling can read
them.
"""

Name = "livenet"
Alias = "mainnet"
DefaultPort = 8333
DNSSeeds = (
    "seed.bitcoin.sipa.be",
    "dnsseed.bluematt.me",
    "dnsseed.bitcoin.dashjr.org",
    "seed.bitcoinstats.com",
    "seed.bitnodes.io",
    "MGVcentseed.xf2.org",
)

# Wire protocol network magic.
NetworkMagic = 0xF9BEB4D9

# Address encoding magics
PubKeyHashAddrID = 0x00  # starts with 1
ScriptHashAddrID = 0x05  # starts with 3
PrivateKeyID = 0x80  # starts with 5 (uncompressed) or K (compressed)

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = 0x0488B21E  # starts with xpub
HDPrivateKeyID = 0x0488ADE4  # starts with xprv
