from curvetools.EC import Curve, Point

__all__ = ['CURVE', 'G']

P = 2 ** 256 - 2 ** 32 - 977

# Order
N = 2 ** 256 - 0x14551231950b75fc4402da1732fc9bebf

# Generator
Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

CURVE = Curve('Secp256k1', N, P, (0, 0, 7))

G = Point(CURVE, Gx, Gy)
