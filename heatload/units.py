"""Conversions between the power units used on the load summaries.

The conversions go through the package's unit registry, where `BTUh` is
defined as 1/3412 kW and `TRn` (refrigeration ton) as 12000 BTUh.
"""
from . import Quantity

Q_ = Quantity


def btuhr_to_kw(btuhr: float) -> float:
    """Returns the heat rate `btuhr` in BTU/hr expressed in kW."""
    return Q_(btuhr, 'BTUh').to('kW').m


def kw_to_btuhr(kw: float) -> float:
    """Returns the heat rate `kw` in kW expressed in BTU/hr."""
    return Q_(kw, 'kW').to('BTUh').m


def btuhr_to_ton(btuhr: float) -> float:
    """Returns the heat rate `btuhr` in BTU/hr expressed in refrigeration
    tons.
    """
    return Q_(btuhr, 'BTUh').to('TRn').m


def ton_to_btuhr(ton: float) -> float:
    """Returns the heat rate `ton` in refrigeration tons expressed in BTU/hr."""
    return Q_(ton, 'TRn').to('BTUh').m
