# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# eccwrapper.py
#
# 18.10.2026
#
# @desc: Wrapper class for fastecdsa class. For Elliptic Curve and
#        Point representation and manipulation. The protocol code only
#        talks to the Curve interface, fastecdsa stays behind it.
# ===================================================================
import hashlib

import fastecdsa.curve as curvelib
from fastecdsa.encoding.sec1 import SEC1Encoder
from fastecdsa.point import Point as FastecdsaPoint

from DLCGT.errors import ConfigurationError, DeserializationError

# prime order curves with p = 3 mod 4, needed for hash_to_point
CURVES = {
    "secp256k1": curvelib.secp256k1,
    "P256": curvelib.P256,
    "P384": curvelib.P384,
    "P521": curvelib.P521,
    "brainpoolP256r1": curvelib.brainpoolP256r1,
    "brainpoolP384r1": curvelib.brainpoolP384r1,
    "brainpoolP512r1": curvelib.brainpoolP512r1,
}

DEFAULT_CURVE = "secp256k1"


class ShortPoint:
    """Elliptic Curve Point representation. The point at infinity has no
    coordinates.

    Attributes:
        x (int): the x coordinate of the point
        y (int): the y coordinate of the point
    """
    __slots__ = ("x", "y")

    def __init__(self, x=None, y=None):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, key, value):
        raise AttributeError("ShortPoint is immutable")

    @classmethod
    def infinity(cls):
        return cls(None, None)

    @property
    def is_infinity(self):
        return self.x is None

    def __eq__(self, other):
        """Compare two elliptic curve points for equality.

        Args:
            other (ShortPoint): second elliptic curve point

        Returns:
            bool: True if points are the same, False else
        """
        if not isinstance(other, ShortPoint):
            # don't attempt to compare against unrelated types
            return NotImplemented

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __reduce__(self):
        return ShortPoint, (self.x, self.y)

    def __repr__(self):
        if self.is_infinity:
            return "ShortPoint(infinity)"
        return "ShortPoint(x=0x%x, y=0x%x)" % (self.x, self.y)


class Curve:
    """Group interface used by the protocol engine.

    Attributes:
        name (str): curve name
        order (int): order of the base point
        generator (ShortPoint): base point
        point_size (int): bytes of a serialized point
        scalar_size (int): bytes of a serialized scalar
    """
    name = None
    order = None
    generator = None
    point_size = None
    scalar_size = None

    def __init__(self):
        raise NotImplementedError('Abstract method __init__')

    def multiplication(self, k, P):
        raise NotImplementedError('Abstract method multiplication')

    def addition(self, P, Q):
        raise NotImplementedError('Abstract method addition')

    def negation(self, P):
        raise NotImplementedError('Abstract method negation')

    def isoncurve(self, P):
        raise NotImplementedError('Abstract method isoncurve')

    def point_to_bytes(self, P):
        raise NotImplementedError('Abstract method point_to_bytes')

    def bytes_to_point(self, data):
        raise NotImplementedError('Abstract method bytes_to_point')

    def hash_to_point(self, data):
        raise NotImplementedError('Abstract method hash_to_point')

    def subtraction(self, P, Q):
        """Subtract two elliptic curve points P and Q

        Args:
            P (ShortPoint): elliptic curve point
            Q (ShortPoint): elliptic curve point

        Returns:
            P-Q (ShortPoint)
        """
        return self.addition(P, self.negation(Q))

    def sum(self, points):
        """Add up a sequence of points, the empty sum is the point at
        infinity

        Args:
            points (Iterable[ShortPoint]): elliptic curve points

        Returns:
            ShortPoint: sum of all points
        """
        total = ShortPoint.infinity()
        for point in points:
            total = self.addition(total, point)
        return total

    def scalar_to_bytes(self, k):
        """Serialize scalar k as fixed width big endian integer

        Args:
            k (int): scalar in range 0,...,order-1

        Returns:
            bytes: scalar_size bytes
        """
        return (k % self.order).to_bytes(self.scalar_size, "big")

    def bytes_to_scalar(self, data):
        """Deserialize a scalar, values outside the field are rejected

        Args:
            data (bytes): scalar_size bytes

        Returns:
            int: scalar
        """
        if len(data) != self.scalar_size:
            raise DeserializationError(
                "scalar must be %d bytes, got %d" % (self.scalar_size,
                                                     len(data)))
        k = int.from_bytes(data, "big")
        if k >= self.order:
            raise DeserializationError("scalar is not reduced mod order")
        return k


class Fastecdsa(Curve):
    """Wrapper class for fastecdsa library.

    Attributes:
        _curve: curve object from fastecdsa
        name: curve name
        generator: the base point of the curve
        order: the order of the base point of the curve
    """
    def __init__(self, curve, name=None):
        """
        Args:
            curve: curve object from fastecdsa
            name (str): registry name of the curve
        """
        if curve.p % 4 != 3:
            raise ConfigurationError(
                "curve %s is not supported, p must be 3 mod 4" % curve.name)
        self._curve = curve
        self.name = name if name is not None else curve.name
        self.generator = ShortPoint(self._curve.gx, self._curve.gy)
        self.order = self._curve.q
        self.coordinate_size = (self._curve.p.bit_length() + 7) // 8
        self.point_size = 1 + 2 * self.coordinate_size
        self.scalar_size = (self.order.bit_length() + 7) // 8

    @classmethod
    def from_name(cls, name):
        """Look up a curve from the registry

        Args:
            name (str): curve name, see CURVES

        Returns:
            Fastecdsa: curve object
        """
        try:
            return cls(CURVES[name], name)
        except KeyError:
            raise ConfigurationError(
                "unknown curve %r, supported: %s" % (
                    name, ", ".join(sorted(CURVES)))) from None

    def multiplication(self, k, P):
        """Multiply a elliptic curve point P by a integer k

        Args:
            k (int): integer, reduced mod order
            P (ShortPoint): elliptic curve point

        Returns:
            k*P (ShortPoint)
        """
        k = k % self.order
        if P.is_infinity or k == 0:
            return ShortPoint.infinity()
        product = k * self.shortpoint_to_point(P)
        return ShortPoint(product.x, product.y)

    def addition(self, P, Q):
        """Add two elliptic curve points P and Q

        Args:
            P (ShortPoint): elliptic curve point
            Q (ShortPoint): elliptic curve point

        Returns:
            P+Q (ShortPoint)
        """
        if P.is_infinity:
            return Q
        if Q.is_infinity:
            return P
        if P.x == Q.x and (P.y + Q.y) % self._curve.p == 0:
            return ShortPoint.infinity()
        sum1 = self.shortpoint_to_point(P) + self.shortpoint_to_point(Q)
        return ShortPoint(sum1.x, sum1.y)

    def negation(self, P):
        """Negate elliptic curve point P

        Args:
            P (ShortPoint): elliptic curve point

        Returns:
            -P (ShortPoint)
        """
        if P.is_infinity:
            return P
        return ShortPoint(P.x, (-P.y) % self._curve.p)

    def isoncurve(self, P):
        """Check if point P is on curve _curve

        Args:
            P (ShortPoint): elliptic curve point

        Returns:
            True if point is on curve, False else
        """
        if P.is_infinity:
            return True
        if not (0 <= P.x < self._curve.p and 0 <= P.y < self._curve.p):
            return False
        return self._curve.is_point_on_curve((P.x, P.y))

    def shortpoint_to_point(self, P):
        """Transform ShortPoint to fastecdsa point

        Args:
            P (ShortPoint): elliptic curve point, not infinity

        Returns:
            fastecdsa point
        """
        return FastecdsaPoint(P.x, P.y, self._curve)

    def point_to_bytes(self, P):
        """Serialize P uncompressed (SEC1), the point at infinity is
        encoded as zero bytes of the same width

        Args:
            P (ShortPoint): elliptic curve point

        Returns:
            bytes: point_size bytes
        """
        if P.is_infinity:
            return bytes(self.point_size)
        return SEC1Encoder.encode_public_key(self.shortpoint_to_point(P),
                                             compressed=False)

    def bytes_to_point(self, data):
        """Deserialize an uncompressed point and check it is on the curve

        Args:
            data (bytes): point_size bytes

        Returns:
            ShortPoint: elliptic curve point
        """
        if len(data) != self.point_size:
            raise DeserializationError(
                "point must be %d bytes, got %d" % (self.point_size,
                                                    len(data)))
        if data == bytes(self.point_size):
            return ShortPoint.infinity()
        if data[:1] != b"\x04":
            raise DeserializationError("point is not SEC1 uncompressed")

        size = self.coordinate_size
        x = int.from_bytes(data[1:size + 1], "big")
        y = int.from_bytes(data[size + 1:], "big")
        if not self.isoncurve(ShortPoint(x, y)):
            raise DeserializationError("point is not on curve %s" % self.name)

        point = SEC1Encoder.decode_public_key(data, self._curve)
        return ShortPoint(point.x, point.y)

    def hash_to_point(self, data):
        """Hash data to a curve point with try-and-increment, nobody knows
        the discrete logarithm of the result

        Args:
            data (bytes): input, should carry a domain label

        Returns:
            ShortPoint: elliptic curve point
        """
        p = self._curve.p
        for counter in range(256):
            digest = hashlib.shake_256(
                b"DLCGT/hash_to_point" + self.name.encode() + data
                + counter.to_bytes(1, "big")).digest(self.coordinate_size + 16)
            x = int.from_bytes(digest, "big") % p
            alpha = (pow(x, 3, p) + self._curve.a * x + self._curve.b) % p
            if alpha == 0 or pow(alpha, (p - 1) // 2, p) != 1:
                continue
            y = pow(alpha, (p + 1) // 4, p)
            # canonical root: the even one
            if y % 2 == 1:
                y = p - y
            return ShortPoint(x, y)
        raise ConfigurationError("hash_to_point found no point")  # pragma: no cover
