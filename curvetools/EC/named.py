import os
import logging
from enum import Enum, unique

from curvetools.EC.error import UnknownCurve

__all__ = ['NAMED_CURVE', 'named_curve', 'current_curve', 'default_curve']

log = logging.getLogger(__name__)


@unique
class NAMED_CURVE(Enum):
    SECP256K1 = 'secp256k1'
    SECP256R1 = 'P-256'


def current_curve():
    name = os.environ.get('CURVETOOLS_CURVE', 'secp256k1')
    try:
        return NAMED_CURVE(name)
    except ValueError:
        raise UnknownCurve(f'Unknown curve {name!r}') from None


def named_curve(name):
    """Curve parameters registered under a NAMED_CURVE member or its value"""
    from curvetools.EC import secp256k1, secp256r1
    curves = {
        NAMED_CURVE.SECP256K1: secp256k1.CURVE,
        NAMED_CURVE.SECP256R1: secp256r1.CURVE
    }
    try:
        return curves[NAMED_CURVE(name)]
    except ValueError:
        raise UnknownCurve(f'Unknown curve {name!r}') from None


def default_curve():
    curve = current_curve()
    log.debug('Using %s as the default curve', curve.value)
    return named_curve(curve)
