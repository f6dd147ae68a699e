"""Closed-form load equations for preliminary sizing in Imperial units.

All temperature differences are in degrees Fahrenheit. The coefficients
1.08 and 500 are the usual rounded property groups for standard air
(density x specific heat x 60 min/hr) and water (8.33 lb/gal x 1 BTU/lb.F x
60 min/hr).
"""

AIR_SENSIBLE_FACTOR = 1.08
HYDRONIC_FACTOR = 500.0
MINUTES_PER_HOUR = 60.0


def air_sensible_btuhr(cfm: float, delta_T: float) -> float:
    """Returns the sensible heat rate in BTU/hr carried by an airflow.

    Parameters
    ----------
    cfm:
        Volume flow rate of air in cubic feet per minute.
    delta_T:
        Temperature difference of the air in degrees Fahrenheit. A negative
        value gives a negative (cooling) heat rate.
    """
    # Qs = 1.08 * CFM * dT
    return AIR_SENSIBLE_FACTOR * cfm * delta_T


def hydronic_btuhr(gpm: float, delta_T: float) -> float:
    """Returns the heat rate in BTU/hr carried by a water flow.

    Parameters
    ----------
    gpm:
        Volume flow rate of water in gallons per minute.
    delta_T:
        Temperature difference between supply and return in degrees
        Fahrenheit.
    """
    # Q = 500 * GPM * dT
    return HYDRONIC_FACTOR * gpm * delta_T


def conduction_btuhr(U: float, area: float, delta_T: float) -> float:
    """Returns the steady-state conduction heat rate in BTU/hr through a
    building element.

    Parameters
    ----------
    U:
        Thermal transmittance in BTU/(hr.ft2.F).
    area:
        Surface area of the element in square feet.
    delta_T:
        Temperature difference across the element in degrees Fahrenheit.
    """
    # Q = U * A * dT
    return U * area * delta_T


def u_from_r(R: float) -> float:
    """Returns the thermal transmittance U = 1 / R of an element with thermal
    resistance `R` in hr.ft2.F/BTU. `R` must be strictly positive.
    """
    return 1.0 / R


def cfm_from_ach(ach: float, volume: float) -> float:
    """Returns the airflow in CFM that corresponds with `ach` air changes per
    hour of a zone with `volume` in cubic feet.
    """
    # CFM = ACH * V / 60
    return (ach * volume) / MINUTES_PER_HOUR
