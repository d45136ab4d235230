"""
Capability interface a curve backend must provide to the VSS code.

Protocol code only ever holds the opaque group elements returned by a
backend and combines them through these methods; it never looks at
coordinates.
"""

from abc import ABC, abstractmethod

import hashlib

# This implementation can be sped up by storing the midstate after hashing
# tag_hash instead of rehashing it all the time.
def tagged_hash(tag: str, msg: bytes) -> bytes:
    tag_hash = hashlib.sha256(tag.encode()).digest()
    return hashlib.sha256(tag_hash + tag_hash + msg).digest()

class GroupBackend(ABC):
    """A cyclic group of prime order with a public generator G."""

    name = None
    # ScalarField of the group order
    field = None
    # Length in bytes of a compressed element encoding
    point_size = None

    @abstractmethod
    def generator(self):
        """Return the generator G."""

    @abstractmethod
    def identity(self):
        """Return the neutral element."""

    def is_identity(self, A) -> bool:
        return self.eq(A, self.identity())

    @abstractmethod
    def base_exp(self, k):
        """Return k*G."""

    @abstractmethod
    def scale(self, A, k):
        """Return k*A."""

    @abstractmethod
    def add(self, A, B):
        """
        Return A + B. Either operand may be the identity, in which case
        the other operand is returned unchanged.
        """

    def eq(self, A, B) -> bool:
        return A == B

    @abstractmethod
    def encode(self, A) -> bytes:
        """Fixed-size compressed encoding of A (point_size bytes)."""

    @abstractmethod
    def decode(self, b: bytes):
        """
        Inverse of encode.

        Raises:
            DecodeError: If b is not the encoding of a group element.
        """

    @abstractmethod
    def hash_to_point(self, tag: str, msg: bytes):
        """Map (tag, msg) to an element whose discrete log nobody knows."""

    def random_point(self):
        return self.base_exp(self.field.random_nonzero())
