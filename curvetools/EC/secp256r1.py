from curvetools.EC import Curve, Point

__all__ = ['CURVE', 'G']

# https://www.secg.org/sec2-v2.pdf section 2.4.2
P = 2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1

N = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

A = -3
B = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B

Gx = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
Gy = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5

CURVE = Curve('P-256', N, P, (0, A, B))

G = Point(CURVE, Gx, Gy)
