"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""


class MgvError(Exception):
    pass


class InvalidArgument(MgvError):
    """
    An argument has the wrong type or shape, e.g. a network configuration that
    is not a mapping, or an amount that cannot be read as a number.
    """

    pass


class UnknownDenomination(MgvError):
    def __init__(self, code):
        super().__init__(f"unknown denomination code {code!r}")
        self.code = code


class InvalidExchangeRate(MgvError):
    def __init__(self, rate):
        super().__init__(f"invalid exchange rate {rate!r}, must be positive")
        self.rate = rate


class DuplicateNetworkKey(MgvError):
    """
    Adding the network would make a lookup key resolve to more than one
    network.
    """

    def __init__(self, key, owner):
        super().__init__(f"network key {key!r} is already used by network {owner}")
        self.key = key
        self.owner = owner


class UnknownNetwork(MgvError):
    pass
