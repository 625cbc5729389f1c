from typing import Tuple


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    :return: a tuple (gcd, u, v) such that a * u + b * v == gcd
    """
    if a == 0:
        return b, 0, 1
    if b == 0:
        return a, 1, 0

    sign_a, sign_b = sign(a), sign(b)
    a, b = abs(a), abs(b)

    x, y, u, v = 0, 1, 1, 0
    while a:
        q, r = b // a, b % a
        m, n = x - u * q, y - v * q
        b, a, x, y, u, v = a, r, u, v, m, n

    return b, sign_a * x, sign_b * y


def sign(n: int) -> int:
    if n < 0:
        return -1
    elif n > 0:
        return 1
    else:
        return 0


def ceil_div(a: int, b: int) -> int:
    return -(-a // b)
