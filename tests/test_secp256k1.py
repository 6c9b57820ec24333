import unittest

from curvetools.EC import Point
from curvetools.EC.secp256k1 import CURVE, G
from curvetools.EC import secp256r1

# Small multiples of the generator
G2 = Point(CURVE,
           0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
           0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A)
G3 = Point(CURVE,
           0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
           0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672)
G4 = Point(CURVE,
           0xE493DBF1C10D80F3581E4904930B1404CC6C13900EE0758474FA94ABE8C4CD13,
           0x51ED993EA0D455B75642E2098EA51448D967AE33BFBDFE40CFE97BDC47739922)

INF = Point.infinity(CURVE)


class TestSecp256k1(unittest.TestCase):

    def test_vectors_on_curve(self):
        for point in (G, G2, G3, G4):
            self.assertTrue(point.check_on_curve())

    def test_doubling(self):
        self.assertEqual(G + G, G2)
        self.assertEqual(G2 + G2, G4)

    def test_addition(self):
        self.assertEqual(G + G2, G3)
        self.assertEqual(G2 + G, G3)
        self.assertEqual(G3 + G, G4)
        self.assertEqual(G4 - G, G3)

    def test_inverse(self):
        neg = -G
        self.assertEqual(neg.x, G.x)
        self.assertEqual(neg.y, CURVE.P - G.y)
        self.assertEqual(G + neg, INF)
        self.assertEqual(G3 - G3, INF)

    def test_identity(self):
        self.assertEqual(G + INF, G)
        self.assertEqual(INF + G3, G3)
        self.assertEqual(-INF, INF)


class TestSecp256r1(unittest.TestCase):

    def test_generator(self):
        self.assertTrue(secp256r1.G.check_on_curve())
        self.assertTrue(secp256r1.CURVE.is_smooth())

    def test_group_law(self):
        G = secp256r1.G
        G2 = G + G
        self.assertTrue(G2.check_on_curve())
        self.assertTrue((G2 + G).check_on_curve())
        self.assertEqual(G2 + G, G + G2)
        self.assertEqual(G2 - G, G)
        self.assertTrue((G + -G).is_inf())

    def test_distinct_from_secp256k1(self):
        self.assertNotEqual(secp256r1.CURVE, CURVE)
        self.assertNotEqual(secp256r1.G, G)


if __name__ == '__main__':
    unittest.main()
