"""
Elliptic curve group law over prime fields, with BLS signatures on BLS12-381.
"""

from .number_theory_stuff import *
from .EC import *
from .EC.error import *
from .EC.named import *

__all__ = ['Curve', 'Point', 'CURVE_TYPE', 'POINT_TYPE', 'NAMED_CURVE', 'named_curve', 'default_curve',
           'CurveError', 'NotSmooth', 'MismatchedCurve', 'NotOnCurve', 'UnknownCurve',
           'residue', 'xgcd', 'mulinv', 'fermat_inverse']

__version__ = "0.1"
