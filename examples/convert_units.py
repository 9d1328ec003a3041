"""
Copyright (c) 2020, The Decred developers

This example script converts an amount between the MGV denominations and to a
fiat currency at a given exchange rate.

$ python convert_units.py 1.3 KMGV 350
"""

import sys

from megavolatility.unit import UNITS, Unit


def main():
    if len(sys.argv) < 3:
        print("usage: convert_units.py amount code [rate]")
        sys.exit(1)
    amount, code = sys.argv[1], sys.argv[2]
    unit = Unit(amount, code)
    for c in UNITS:
        print(f"{unit.to(c)} {c}")
    if len(sys.argv) > 3:
        rate = float(sys.argv[3])
        print(f"{unit.atRate(rate):.2f} at {rate} per MGV")


if __name__ == "__main__":
    main()
