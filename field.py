from dataclasses import dataclass

import binascii
import secrets

from errors import DecodeError, PreconditionViolation

@dataclass(frozen=True)
class ScalarField:
    """Integers modulo a prime group order."""
    order: int

    @property
    def byte_length(self) -> int:
        return (self.order.bit_length() + 7) // 8

    @property
    def hex_length(self) -> int:
        return 2 * self.byte_length

    def __call__(self, value: int) -> 'Scalar':
        return Scalar(value % self.order, self)

    def zero(self) -> 'Scalar':
        return Scalar(0, self)

    def one(self) -> 'Scalar':
        return Scalar(1, self)

    def random(self) -> 'Scalar':
        return Scalar(secrets.randbelow(self.order), self)

    def random_nonzero(self) -> 'Scalar':
        return Scalar(1 + secrets.randbelow(self.order - 1), self)

    def from_bytes(self, b: bytes) -> 'Scalar':
        if not isinstance(b, (bytes, bytearray)):
            raise DecodeError(f'expected bytes, got {type(b).__name__}')
        if len(b) != self.byte_length:
            raise DecodeError(f'scalar must be {self.byte_length} bytes, got {len(b)}')
        x = int.from_bytes(b, byteorder='big')
        if x >= self.order:
            raise DecodeError('scalar is not reduced modulo the group order')
        return Scalar(x, self)

    def from_hex(self, s: str) -> 'Scalar':
        return self.from_bytes(unhex(s, self.hex_length))

def unhex(s, expected_len):
    if not isinstance(s, str):
        raise DecodeError(f'expected str, got {type(s).__name__}')
    if len(s) != expected_len:
        raise DecodeError(f'expected {expected_len} hex characters, got {len(s)}')
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f'invalid hex: {e}') from e

@dataclass(frozen=True)
class Scalar:
    value: int
    field: ScalarField

    # Always hold the canonical residue in [0, order)
    def __post_init__(self):
        object.__setattr__(self, 'value', self.value % self.field.order)

    def _check(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        if other.field != self.field:
            raise PreconditionViolation('cannot combine scalars from different fields')
        return other.value

    def __add__(self, other):
        y = self._check(other)
        if y is NotImplemented:
            return y
        return Scalar((self.value + y) % self.field.order, self.field)

    def __sub__(self, other):
        y = self._check(other)
        if y is NotImplemented:
            return y
        return Scalar((self.value - y) % self.field.order, self.field)

    def __mul__(self, other):
        y = self._check(other)
        if y is NotImplemented:
            return y
        return Scalar(self.value * y % self.field.order, self.field)

    def __neg__(self):
        return Scalar(-self.value % self.field.order, self.field)

    def inverse(self) -> 'Scalar':
        if self.value == 0:
            raise PreconditionViolation('zero has no multiplicative inverse')
        n = self.field.order
        return Scalar(pow(self.value, n - 2, n), self.field)

    def is_zero(self) -> bool:
        return self.value == 0

    def __int__(self):
        return self.value

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.field.byte_length, byteorder='big')

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self):
        return f'Scalar(0x{self.hex()})'
