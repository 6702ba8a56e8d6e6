"""Ed25519 signatures that use BLAKE2b-512 as the hash function."""

from __future__ import annotations

import hashlib

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = -121665 * pow(121666, _P - 2, _P) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

Point = tuple[int, int, int, int]

_IDENTITY: Point = (0, 1, 1, 0)


def _hash(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=64).digest()


def _hash_int(data: bytes) -> int:
    return int.from_bytes(_hash(data), "little") % _L


def _inv(x: int) -> int:
    return pow(x, _P - 2, _P)


def _add(p: Point, q: Point) -> Point:
    a = (p[1] - p[0]) * (q[1] - q[0]) % _P
    b = (p[1] + p[0]) * (q[1] + q[0]) % _P
    c = 2 * p[3] * q[3] * _D % _P
    d = 2 * p[2] * q[2] % _P
    e, f, g, h = b - a, d - c, d + c, b + a
    return (e * f % _P, g * h % _P, f * g % _P, e * h % _P)


def _mul(scalar: int, point: Point) -> Point:
    result = _IDENTITY
    while scalar > 0:
        if scalar & 1:
            result = _add(result, point)
        point = _add(point, point)
        scalar >>= 1
    return result


def _equal(p: Point, q: Point) -> bool:
    return (p[0] * q[2] - q[0] * p[2]) % _P == 0 and (p[1] * q[2] - q[1] * p[2]) % _P == 0


def _recover_x(y: int, sign: int) -> int | None:
    if y >= _P:
        return None
    x2 = (y * y - 1) * _inv(_D * y * y + 1) % _P
    if x2 == 0:
        return None if sign else 0
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P:
        return None
    if (x & 1) != sign:
        x = _P - x
    return x


_GY = 4 * _inv(5) % _P
_GX = _recover_x(_GY, 0)
assert _GX is not None
_BASE: Point = (_GX, _GY, 1, _GX * _GY % _P)


def _compress(point: Point) -> bytes:
    zinv = _inv(point[2])
    x = point[0] * zinv % _P
    y = point[1] * zinv % _P
    return (y | ((x & 1) << 255)).to_bytes(32, "little")


def _decompress(data: bytes) -> Point | None:
    if len(data) != 32:
        return None
    y = int.from_bytes(data, "little")
    sign = y >> 255
    y &= (1 << 255) - 1
    x = _recover_x(y, sign)
    if x is None:
        return None
    return (x, y, 1, x * y % _P)


def _expand(secret: bytes) -> tuple[int, bytes]:
    secret = bytes(secret)
    if len(secret) != 32:
        raise ValueError(f"Secret key must be 32 bytes, got {len(secret)}")
    h = _hash(secret)
    scalar = int.from_bytes(h[:32], "little")
    scalar &= (1 << 254) - 8
    scalar |= 1 << 254
    return scalar, h[32:]


def public_from_secret(secret: bytes) -> bytes:
    """Return the 32 byte public key for a 32 byte secret key."""
    scalar, _ = _expand(secret)
    return _compress(_mul(scalar, _BASE))


def sign(secret: bytes, message: bytes) -> bytes:
    """Return the 64 byte signature of ``message``."""
    scalar, prefix = _expand(secret)
    public = _compress(_mul(scalar, _BASE))
    message = bytes(message)
    r = _hash_int(prefix + message)
    r_encoded = _compress(_mul(r, _BASE))
    h = _hash_int(r_encoded + public + message)
    s = (r + h * scalar) % _L
    return r_encoded + s.to_bytes(32, "little")


def verify(public: bytes, message: bytes, signature: bytes) -> bool:
    """Check ``signature`` over ``message``.

    Raises ``ValueError`` when ``public`` is not a valid curve point.
    """
    public = bytes(public)
    a_point = _decompress(public)
    if a_point is None:
        raise ValueError("Invalid public key")
    signature = bytes(signature)
    if len(signature) != 64:
        return False
    r_encoded = signature[:32]
    r_point = _decompress(r_encoded)
    if r_point is None:
        return False
    s = int.from_bytes(signature[32:], "little")
    if s >= _L:
        return False
    h = _hash_int(r_encoded + public + bytes(message))
    return _equal(_mul(s, _BASE), _add(r_point, _mul(h, a_point)))