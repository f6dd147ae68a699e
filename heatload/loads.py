"""Load items and the interactive builders that create them.

Each builder asks the user for a name and the inputs of one load method,
evaluates the corresponding equation of module `formulas`, writes the
derivation with the actual values to the console and returns a `LoadItem`.
The same builders are used for quick calculations and for the items of a
project.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from . import Quantity
from .console import Console
from .formulas import (
    air_sensible_btuhr,
    hydronic_btuhr,
    conduction_btuhr,
    cfm_from_ach,
    u_from_r
)
from .logging import ModuleLogger

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)

# input bounds
MAX_FLOW = 1e9          # CFM and GPM
MAX_AREA = 1e12         # ft2
MAX_VOLUME = 1e18       # ft3
MAX_ACH = 1e6           # 1/hr
MAX_U = 1e6             # BTU/(hr.ft2.F)
MIN_R = 1e-6            # guard against division by zero in U = 1 / R
MAX_R = 1e12            # hr.ft2.F/BTU
DELTA_T_RANGE = (-200.0, 200.0)  # F


class LoadMethod(Enum):
    """Identifies the equation that produced a load. The value is the tag
    that is shown in summaries and exports.
    """
    AIR_SENSIBLE = 'AirSens'
    HYDRONIC = 'Hydronic'
    CONDUCTION = 'Cond(UA)'
    ACH = 'ACH->Air'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LoadItem:
    name: str
    method: LoadMethod
    btu_per_hr: float

    @property
    def Q_dot(self) -> Quantity:
        """Returns the heat rate of the item as a quantity in BTU/hr."""
        return Q_(self.btu_per_hr, 'BTUh')


def _read_name(console: Console, examples: str, default: str) -> str:
    name = console.read_line(f"Name (e.g., {examples}): ")
    return name if name else default


def _read_delta_T(console: Console) -> float:
    return console.read_float("Delta-T (F): ", *DELTA_T_RANGE)


def _create_item(name: str, method: LoadMethod, btu_per_hr: float) -> LoadItem:
    item = LoadItem(name, method, btu_per_hr)
    logger.debug(f"{method} load '{name}': {btu_per_hr:.1f} BTU/hr")
    return item


def build_air_sensible_item(console: Console) -> LoadItem:
    name = _read_name(console, "Supply air, Zone vent", "Air Sensible Load")
    cfm = console.read_float("CFM: ", 0.0, MAX_FLOW)
    dT = _read_delta_T(console)
    Q = air_sensible_btuhr(cfm, dT)
    console.write(f"Result: Qs = 1.08 * {cfm:g} * {dT:g} = {Q:.1f} BTU/hr\n")
    return _create_item(name, LoadMethod.AIR_SENSIBLE, Q)


def build_hydronic_item(console: Console) -> LoadItem:
    name = _read_name(console, "HW coil, baseboard loop", "Hydronic Load")
    gpm = console.read_float("GPM: ", 0.0, MAX_FLOW)
    dT = _read_delta_T(console)
    Q = hydronic_btuhr(gpm, dT)
    console.write(f"Result: Q = 500 * {gpm:g} * {dT:g} = {Q:.1f} BTU/hr\n")
    return _create_item(name, LoadMethod.HYDRONIC, Q)


def build_conduction_item(console: Console) -> LoadItem:
    """Builds a conduction load through a building element. The user chooses
    to enter either the U-value of the element directly or its R-value, in
    which case U = 1 / R.
    """
    name = _read_name(console, "Exterior wall, Roof, Glass", "Conduction Load")
    console.write(
        "\nChoose input form:\n"
        "  1) U-value directly (BTU/hr·ft^2·F)\n"
        "  2) R-value (hr·ft^2·F/BTU)  -> U = 1/R\n"
    )
    mode = console.read_int("Select: ", 1, 2)
    area = console.read_float("Area (ft^2): ", 0.0, MAX_AREA)
    dT = _read_delta_T(console)
    if mode == 1:
        U = console.read_float("U-value: ", 0.0, MAX_U)
    else:
        R = console.read_float("R-value: ", MIN_R, MAX_R)
        U = u_from_r(R)
        console.write(f"Computed U = 1/R = {U:.6f}\n")
    Q = conduction_btuhr(U, area, dT)
    console.write(
        f"Result: Q = U * A * dT = {U:.6f} * {area:.1f} * {dT:.1f} "
        f"= {Q:.1f} BTU/hr\n"
    )
    return _create_item(name, LoadMethod.CONDUCTION, Q)


def build_ach_item(console: Console) -> LoadItem:
    """Builds the sensible load of the outdoor air entering a zone at a given
    number of air changes per hour. The intermediate airflow is written to
    the console together with the resulting load.
    """
    name = _read_name(console, "Infiltration, Ventilation", "ACH Air Load")
    volume = console.read_float("Zone volume (ft^3): ", 0.0, MAX_VOLUME)
    ach = console.read_float("ACH (air changes per hour): ", 0.0, MAX_ACH)
    dT = _read_delta_T(console)
    cfm = cfm_from_ach(ach, volume)
    Q = air_sensible_btuhr(cfm, dT)
    console.write(
        f"CFM = ACH * Volume / 60 = {ach:.2f} * {volume:.2f} / 60 = {cfm:.2f}\n"
        f"Qs  = 1.08 * CFM * dT   = 1.08 * {cfm:.2f} * {dT:.2f} = {Q:.1f} BTU/hr\n"
    )
    return _create_item(name, LoadMethod.ACH, Q)


BUILDERS: dict[LoadMethod, Callable[[Console], LoadItem]] = {
    LoadMethod.AIR_SENSIBLE: build_air_sensible_item,
    LoadMethod.HYDRONIC: build_hydronic_item,
    LoadMethod.CONDUCTION: build_conduction_item,
    LoadMethod.ACH: build_ach_item
}
