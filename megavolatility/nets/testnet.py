"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

testnet holds the public test network parameters. The test network can be
switched into regtest mode at runtime, in which case the values in the regtest
module are used for the port, the network magic and the DNS seeds.
"""

Name = "testnet"
Alias = "regtest"
DefaultPort = 11411
DNSSeeds = ()

# Wire protocol network magic.
NetworkMagic = 0x11411000

# Address encoding magics
PubKeyHashAddrID = 0x6F  # starts with m or n
ScriptHashAddrID = 0xC4  # starts with 2
PrivateKeyID = 0xEF  # starts with 9 (uncompressed) or c (compressed)

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = 0x043587CF  # starts with tpub
HDPrivateKeyID = 0x04358394  # starts with tprv
