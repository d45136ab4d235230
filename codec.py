"""
Fixed-width lowercase hex encodings, with no separators or length prefixes.

    scalar           64 chars (32 bytes, big endian)
    point            2 * backend.point_size chars (66 on secp256k1)
    share            index || value
    verifiable share index || value || decommitment
    commitment       point || point || ...
"""

from errors import DecodeError, GroupError
from field import unhex
from shares import Commitment, Share, VerifiableShare

def scalar_to_hex(x):
    return x.hex()

def scalar_from_hex(field, s):
    return field.from_hex(s)

def point_to_hex(backend, A):
    return backend.encode(A).hex()

def point_from_hex(backend, s):
    b = unhex(s, 2 * backend.point_size)
    try:
        return backend.decode(b)
    except GroupError as e:
        raise DecodeError(str(e)) from e

def _scalars_from_hex(field, s, count):
    if not isinstance(s, str):
        raise DecodeError(f'expected str, got {type(s).__name__}')
    width = field.hex_length
    if len(s) != count * width:
        raise DecodeError(f'expected {count * width} hex characters, got {len(s)}')
    return [field.from_hex(s[i * width:(i + 1) * width]) for i in range(count)]

def _check_index(index):
    if index.is_zero():
        raise DecodeError('share index must not be zero')

def share_to_hex(share):
    return share.index.hex() + share.value.hex()

def share_from_hex(field, s):
    index, value = _scalars_from_hex(field, s, 2)
    _check_index(index)
    return Share(index, value)

def vshare_to_hex(vshare):
    return vshare.index.hex() + vshare.value.hex() + vshare.decommitment.hex()

def vshare_from_hex(field, s):
    index, value, decommitment = _scalars_from_hex(field, s, 3)
    _check_index(index)
    return VerifiableShare(index, value, decommitment)

def commitment_to_hex(backend, commitment):
    return ''.join(point_to_hex(backend, c_i) for c_i in commitment)

def commitment_from_hex(backend, s):
    if not isinstance(s, str):
        raise DecodeError(f'expected str, got {type(s).__name__}')
    width = 2 * backend.point_size
    if not s or len(s) % width:
        raise DecodeError(f'commitment length must be a positive multiple of {width}, got {len(s)}')
    return Commitment(point_from_hex(backend, s[i:i + width]) for i in range(0, len(s), width))
