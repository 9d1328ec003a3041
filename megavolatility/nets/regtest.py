"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

regtest holds the local regression test parameters. These are not a network of
their own. They replace the testnet port, magic and seeds while regtest mode is
enabled on the registry's test network.
"""

DefaultPort = 12411
DNSSeeds = ()

# Wire protocol network magic.
NetworkMagic = 0x12411000
