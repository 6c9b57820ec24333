__all__ = ['residue', 'xgcd', 'mulinv', 'fermat_inverse']


def residue(a, p):
    """Canonical representative of a modulo p, always in 0..p-1"""
    # % takes the sign of the divisor, so a negative a still lands in 0..p-1
    return a % p


def xgcd(b, n):
    """Takes integers b, n as input, and return a triple (g, x, y), such that bx + ny = g = gcd(b, n)"""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while n != 0:
        q, b, n = b // n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def mulinv(b, n):
    """
        An application of extended GCD algorithm to finding modular inverses.

        Works for any modulus n > 1. The group law only needs fermat_inverse since curve moduli are prime,
        mulinv is the helper for composite moduli such as the group order N.
    """
    g, x, _ = xgcd(residue(b, n), n)
    if g != 1:
        raise ZeroDivisionError(f'{b} has no inverse modulo {n}')
    return residue(x, n)


def fermat_inverse(b, p):
    """
        Inverse of b in the prime field F_p, computed as b^(p-2) mod p.

        Only valid when p is prime. Inverting a multiple of p raises ZeroDivisionError.
    """
    b = residue(b, p)
    if b == 0:
        raise ZeroDivisionError(f'0 has no inverse modulo {p}')
    return pow(b, p - 2, p)
