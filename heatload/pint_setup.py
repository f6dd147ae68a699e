import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

unit_definitions = [
    # rounded conversion used throughout HVAC quick sizing: 1 kW = 3412 BTU/hr
    'btu_per_hour_nominal = kilowatt / 3412 = BTUh',
    'refrigeration_ton_nominal = 12000 * btu_per_hour_nominal = TRn'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)
