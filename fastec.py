from itertools import count

from fastecdsa.curve import secp256k1
from fastecdsa.point import Point

from errors import DecodeError, GroupError
from field import Scalar, ScalarField
from group import GroupBackend, tagged_hash

G = secp256k1.G
n = secp256k1.q
p = secp256k1.p
infinity = Point.IDENTITY_ELEMENT

def point_add(A, B):
    # Serializing / deserializing when sending points
    # over the network could cause a curve mismatch
    if A != infinity:
        A = Point(A.x, A.y, secp256k1)
    if B != infinity:
        B = Point(B.x, B.y, secp256k1)
    return A + B

def point_mul(A, k):
    return A * k

def bytes_from_int(x: int) -> bytes:
    return x.to_bytes(32, byteorder="big")

def bytes_from_point(P: Point) -> bytes:
    prefix = b'\x03' if P.y & 1 else b'\x02'
    return prefix + bytes_from_int(P.x)

def int_from_bytes(b: bytes) -> int:
    return int.from_bytes(b, byteorder="big")

def lift_x(x: int, odd: bool) -> Point:
    if x >= p:
        raise DecodeError('x coordinate is not a field element')
    y_sq = (pow(x, 3, p) + 7) % p
    # p = 3 mod 4, so a square root (if one exists) is y_sq^((p + 1) / 4)
    y = pow(y_sq, (p + 1) // 4, p)
    if pow(y, 2, p) != y_sq:
        raise DecodeError('x coordinate is not on the curve')
    if (y & 1) != odd:
        y = p - y
    try:
        return Point(x, y, secp256k1)
    except ValueError as e:
        raise DecodeError(str(e)) from e

class Secp256k1Backend(GroupBackend):
    name = 'secp256k1'
    field = ScalarField(n)
    point_size = 33

    def generator(self):
        return G

    def identity(self):
        return infinity

    def _point(self, A):
        if not isinstance(A, Point):
            raise GroupError(f'expected a curve point, got {type(A).__name__}')
        if A == infinity:
            return A
        try:
            return Point(A.x, A.y, secp256k1)
        except ValueError as e:
            raise GroupError(f'point is not on {self.name}') from e

    def _scalar(self, k):
        if not isinstance(k, Scalar) or k.field != self.field:
            raise GroupError('expected a scalar modulo the secp256k1 group order')
        return k.value

    def base_exp(self, k):
        return self.scale(G, k)

    # The identity and the zero scalar are handled here rather than passed
    # to fastecdsa, which has no coordinates for the point at infinity.
    def scale(self, A, k):
        A = self._point(A)
        k = self._scalar(k)
        if A == infinity or k == 0:
            return infinity
        return point_mul(A, k)

    def add(self, A, B):
        return point_add(self._point(A), self._point(B))

    def eq(self, A, B):
        return self._point(A) == self._point(B)

    def encode(self, A):
        A = self._point(A)
        if A == infinity:
            raise GroupError('the point at infinity has no compressed encoding')
        return bytes_from_point(A)

    def decode(self, b):
        if not isinstance(b, (bytes, bytearray)):
            raise DecodeError(f'expected bytes, got {type(b).__name__}')
        if len(b) != self.point_size:
            raise DecodeError(f'point must be {self.point_size} bytes, got {len(b)}')
        if b[0] not in (2, 3):
            raise DecodeError(f'invalid compressed point prefix 0x{b[0]:02x}')
        return lift_x(int_from_bytes(b[1:]), b[0] == 3)

    def hash_to_point(self, tag, msg):
        # Try-and-increment: the first counter whose digest is a valid
        # x coordinate wins, taking the even y.
        for ctr in count():
            x = tagged_hash(tag, msg + ctr.to_bytes(4, byteorder="big"))
            try:
                return self.decode(b'\x02' + x)
            except DecodeError:
                continue
