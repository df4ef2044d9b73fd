'''
GF(256) arithmetic and the Reed-Solomon encoder used for QR error correction.

The field is built from the primitive polynomial x^8 + x^4 + x^3 + x^2 + 1
(0x11D) with generator alpha = 2. Tables are computed once at import.
'''

from functools import lru_cache

PRIMITIVE_POLYNOMIAL = 0x11D


def _build_tables():
    exp_table = [0] * 512
    log_table = [0] * 256

    x = 1
    for power in range(255):
        exp_table[power] = x
        log_table[x] = power
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE_POLYNOMIAL

    # Doubled so a sum of two logs never needs a modulo
    for power in range(255, 512):
        exp_table[power] = exp_table[power - 255]

    return tuple(exp_table), tuple(log_table)


EXP_TABLE, LOG_TABLE = _build_tables()


def gf_multiply(a, b):
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[LOG_TABLE[a] + LOG_TABLE[b]]


def gf_divide(a, b):
    if b == 0:
        raise ZeroDivisionError('division by zero in GF(256)')
    if a == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] - LOG_TABLE[b]) % 255]


def gf_power(a, n):
    if a == 0:
        return 0 if n > 0 else 1
    return EXP_TABLE[(LOG_TABLE[a] * n) % 255]


def gf_inverse(a):
    if a == 0:
        raise ZeroDivisionError('0 has no inverse in GF(256)')
    return EXP_TABLE[255 - LOG_TABLE[a]]


@lru_cache(maxsize=None)
def generator_polynomial(degree):
    '''
    Coefficients of (x - a^0)(x - a^1)...(x - a^(degree - 1)), highest degree first.
    The leading coefficient is always 1.
    '''

    polynomial = [1]
    for power in range(degree):
        factor = EXP_TABLE[power]
        product = polynomial + [0]
        for index, coefficient in enumerate(polynomial):
            product[index + 1] ^= gf_multiply(coefficient, factor)
        polynomial = product

    return tuple(polynomial)


def rs_remainder(data, degree):
    '''
    Error correction codewords for a block: the remainder of
    data(x) * x^degree divided by the generator polynomial
    '''

    generator = generator_polynomial(degree)
    remainder = list(data) + [0] * degree

    for index in range(len(data)):
        factor = remainder[index]
        if factor == 0:
            continue

        for offset in range(1, len(generator)):
            remainder[index + offset] ^= gf_multiply(generator[offset], factor)

    return remainder[len(data):]
