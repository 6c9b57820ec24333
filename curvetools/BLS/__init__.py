"""
BLS signatures over the BLS12-381 pairing, on top of py_ecc.

Public keys and the base point live in G1, messages and signatures in G2:
verification checks e(pk, H(m)) == e(g, sig).
"""
import secrets
import hashlib

from py_ecc.optimized_bls12_381 import G1, multiply, pairing, curve_order
from py_ecc.bls.hash_to_curve import hash_to_G2

__all__ = ['DST', 'hash_to_point', 'sign', 'verify', 'generate_keypair']

DST = b'BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_'


def hash_to_point(message: bytes):
    return hash_to_G2(message, DST, hashlib.sha256)


def sign(private_key: int, message):
    return multiply(message, private_key)


def verify(public_key, g, signature, message) -> bool:
    # py_ecc takes the G2 argument first
    return pairing(message, public_key) == pairing(signature, g)


def generate_keypair(g=G1):
    private = 1 + secrets.randbelow(curve_order - 1)
    return private, multiply(g, private)
