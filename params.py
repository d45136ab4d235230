from dataclasses import dataclass, replace
from typing import Any

import logging

from errors import PreconditionViolation
from fastec import Secp256k1Backend
from group import GroupBackend

# Domain separation tag for deriving the second generator. Changing it
# changes H and therefore every commitment; do not touch.
H_TAG = 'PedersenVSS/H'

def derive_h(backend: GroupBackend):
    """
    Derive the second Pedersen generator H by hashing the compressed
    encoding of G onto the curve. Nobody knows log_G(H), which is what
    keeps the commitments hiding.
    """
    return backend.hash_to_point(H_TAG, backend.encode(backend.generator()))

@dataclass(frozen=True)
class VSSParams:
    """
    Curve backend and second generator shared by every sharing,
    verification and reconstruction call. Build it once at startup and
    pass it around; it is never mutated.
    """
    backend: GroupBackend
    h: Any

    def __post_init__(self):
        check_generator(self.backend, self.h)

    @property
    def field(self):
        return self.backend.field

    @classmethod
    def secp256k1(cls):
        backend = Secp256k1Backend()
        h = derive_h(backend)
        logging.debug(f'Derived second generator H = {backend.encode(h).hex()} on {backend.name}')
        return cls(backend, h)

    def with_h(self, h):
        return replace(self, h=h)

def check_generator(backend, h):
    if backend.is_identity(h):
        raise PreconditionViolation('H must not be the identity')
    if backend.eq(h, backend.generator()):
        raise PreconditionViolation('H must be independent of G')
