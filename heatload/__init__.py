from .pint_setup import UNITS, Quantity

__version__ = '1.0.0'
