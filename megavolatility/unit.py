"""
Copyright (c) 2020, The Decred developers
See LICENSE for details.

Unit converts amounts between the MGV denominations, and between MGV and fiat
at a caller-supplied exchange rate.

A Unit only stores the integer number of smallest units ("decimals"). Every
other denomination is computed from that integer when it is read and rounded
to the denomination's display precision, so repeated conversions never
accumulate rounding error. The arithmetic is done with decimal.Decimal.

    Unit.fromKMGV(1.3).todecimals()
    Unit.fromMGVcents(1.3).to(Unit.KMGV)
    Unit.fromFiat(1.3, 350).MGVcents
    Unit(1.3, Unit.MGVcents).MMGV
"""

from collections.abc import Mapping
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
import json
import numbers

from megavolatility import InvalidArgument, InvalidExchangeRate, UnknownDenomination


MMGV = "MMGV"
KMGV = "KMGV"
MGV = "MGV"
MGVcents = "MGVcents"
decimals = "decimals"

"""
UNITS maps each denomination code to its number of smallest units and the
number of decimal places used when presenting an amount in that denomination.
"""
UNITS = {
    MMGV: (100000000000, 11),
    KMGV: (100000000, 8),
    MGV: (100000, 5),
    MGVcents: (1000, 3),
    decimals: (1, 0),
}

# Exchange rates are quoted per BASE, and serialized Units are expressed in it.
BASE = MGV

FIAT_PRECISION = 2

# Significant digits of Unit arithmetic. Amounts whose rounded result needs
# more are rejected with InvalidArgument.
DECIMAL_PRECISION = 60


def toDecimal(v):
    """
    Convert an amount to a Decimal. Floats are converted through their shortest
    repr, so 1.3 becomes Decimal("1.3") and not the exact binary value.

    Args:
        v (int, float, str or Decimal): The amount.

    Returns:
        Decimal: The amount.
    """
    if isinstance(v, bool):
        raise InvalidArgument("a bool is not an amount")
    try:
        if isinstance(v, float):
            d = Decimal(repr(v))
        elif isinstance(v, (int, Decimal)):
            d = Decimal(v)
        elif isinstance(v, str):
            d = Decimal(v.strip())
        else:
            raise InvalidArgument(f"unsupported amount type {type(v).__name__}")
    except InvalidOperation as e:
        raise InvalidArgument(f"invalid amount {v!r}") from e
    if not d.is_finite():
        raise InvalidArgument(f"amount must be finite, got {v!r}")
    return d


def isRate(v):
    """Numbers are exchange rates, strings are denomination codes."""
    return isinstance(v, numbers.Number) and not isinstance(v, bool)


def checkRate(rate):
    """
    Args:
        rate (number): The fiat/MGV exchange rate.

    Returns:
        Decimal: The rate.

    Raises:
        InvalidExchangeRate: The rate is not a positive finite number.
    """
    try:
        d = toDecimal(rate)
    except InvalidArgument as e:
        raise InvalidExchangeRate(rate) from e
    if d <= 0:
        raise InvalidExchangeRate(rate)
    return d


def unitParams(code):
    """
    Args:
        code (str): A denomination code.

    Returns:
        int: The number of smallest units in one code.
        int: The display precision of the code.
    """
    if not isinstance(code, str) or code not in UNITS:
        raise UnknownDenomination(code)
    return UNITS[code]


def decimalContext():
    """
    A local decimal context for Unit arithmetic, so results don't depend on
    the caller's current context.
    """
    return localcontext(
        Context(
            prec=DECIMAL_PRECISION,
            rounding=ROUND_HALF_UP,
            traps=[DivisionByZero, InvalidOperation, Overflow],
        )
    )


def quantize(d, places):
    """Round half away from zero to the given number of decimal places."""
    try:
        return d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except DecimalException as e:
        raise InvalidArgument(f"{d} is too large to round to {places} places") from e


class Denomination:
    """
    A read-only accessor for one denomination. On a Unit instance it gives the
    converted amount. On the Unit class it gives the denomination code, so
    Unit.KMGV == "KMGV".
    """

    def __init__(self, code):
        self.code = code

    def __get__(self, unit, cls=None):
        if unit is None:
            return self.code
        return unit.to(self.code)

    def __set__(self, unit, v):
        raise AttributeError(f"can't set attribute {self.code}")


class Unit:
    """
    An immutable amount of MGV.
    """

    __slots__ = ("_value",)

    MMGV = Denomination("MMGV")
    KMGV = Denomination("KMGV")
    MGV = Denomination("MGV")
    MGVcents = Denomination("MGVcents")
    decimals = Denomination("decimals")

    def __init__(self, amount, code):
        """
        Args:
            amount (int, float, str or Decimal): The amount.
            code (str or number): The denomination code of amount, or the
                fiat/MGV exchange rate if amount is a fiat amount.

        Raises:
            UnknownDenomination: code is not a known denomination.
            InvalidExchangeRate: code is a number but not a positive one.
            InvalidArgument: amount cannot be read as a number.
        """
        with decimalContext():
            if isRate(code):
                try:
                    amount = toDecimal(amount) / checkRate(code)
                except DecimalException as e:
                    raise InvalidArgument(f"fiat amount {amount!r} is too large") from e
                code = BASE
            self._value = self._from(amount, code)

    @staticmethod
    def _from(amount, code):
        scale, _ = unitParams(code)
        try:
            return int(quantize(toDecimal(amount) * scale, 0))
        except DecimalException as e:
            raise InvalidArgument(f"amount {amount!r} {code} is too large") from e

    @staticmethod
    def fromMMGV(amount):
        return Unit(amount, MMGV)

    @staticmethod
    def fromKMGV(amount):
        return Unit(amount, KMGV)

    @staticmethod
    def fromMGV(amount):
        return Unit(amount, MGV)

    @staticmethod
    def fromMGVcents(amount):
        return Unit(amount, MGVcents)

    @staticmethod
    def fromdecimals(amount):
        return Unit(amount, decimals)

    @staticmethod
    def fromFiat(amount, rate):
        """
        Create a Unit from a fiat amount and the fiat/MGV exchange rate.

        Args:
            amount (number or str): The fiat amount.
            rate (number): The price of one MGV in the fiat currency.

        Returns:
            Unit: The MGV amount.
        """
        if not isRate(rate):
            raise InvalidExchangeRate(rate)
        return Unit(amount, rate)

    @staticmethod
    def fromObject(data):
        """
        Create a Unit from a mapping with keys amount and code, such as the
        output of toObject.

        Args:
            data (Mapping): The amount and code.

        Returns:
            Unit: The Unit.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument("Argument is expected to be a mapping")
        if "amount" not in data or "code" not in data:
            raise InvalidArgument("amount and code are required")
        return Unit(data["amount"], data["code"])

    @staticmethod
    def fromJSON(s):
        """
        Create a Unit from a JSON-encoded object with keys amount and code.

        Args:
            s (str): The JSON.

        Returns:
            Unit: The Unit.
        """
        try:
            data = json.loads(s)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"invalid Unit JSON {s!r}") from e
        return Unit.fromObject(data)

    @property
    def smallestUnitValue(self):
        """The amount in decimals, the indivisible unit."""
        return self._value

    def to(self, code):
        """
        Returns the value represented in the specified unit.

        Args:
            code (str or number): The denomination code, or a fiat/MGV
                exchange rate.

        Returns:
            int or float: The converted value. Denominations are rounded to
                their display precision, and are ints when that precision is
                zero. Fiat amounts are rounded to 2 decimal places.
        """
        with decimalContext():
            if isRate(code):
                rate = checkRate(code)
                try:
                    v = Decimal(self._value) / UNITS[BASE][0] * rate
                except DecimalException as e:
                    raise InvalidArgument(f"{self} at rate {code} is too large") from e
                return float(quantize(v, FIAT_PRECISION))
            scale, precision = unitParams(code)
            v = quantize(Decimal(self._value) / scale, precision)
        return int(v) if precision == 0 else float(v)

    def toMMGV(self):
        return self.to(MMGV)

    def toKMGV(self):
        return self.to(KMGV)

    def toMGV(self):
        return self.to(MGV)

    def toMGVcents(self):
        return self.to(MGVcents)

    def todecimals(self):
        return self.to(decimals)

    def atRate(self, rate):
        """
        Returns the value represented in fiat.

        Args:
            rate (number): The fiat/MGV exchange rate.

        Returns:
            float: The fiat amount, rounded to 2 decimal places.
        """
        if not isRate(rate):
            raise InvalidExchangeRate(rate)
        return self.to(rate)

    def toObject(self):
        """
        A plain dict representation of the Unit, always in MGV. The amount is
        an int when it is a whole number of MGV.

        Returns:
            dict: The amount and code.
        """
        with decimalContext():
            v = Decimal(self._value) / UNITS[BASE][0]
            amount = int(v) if v == v.to_integral_value() else float(v)
        return {"amount": amount, "code": BASE}

    def toJSON(self):
        """
        Returns:
            str: The JSON-encoded toObject.
        """
        return json.dumps(self.toObject())

    def __str__(self):
        return f"{self.decimals} decimals"

    def __repr__(self):
        return f"<Unit: {self}>"

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)
