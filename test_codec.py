import pytest

from codec import (
    commitment_from_hex, commitment_to_hex,
    point_from_hex, point_to_hex,
    scalar_from_hex, scalar_to_hex,
    share_from_hex, share_to_hex,
    vshare_from_hex, vshare_to_hex,
)
from errors import DecodeError
from params import VSSParams
from shares import Share, VerifiableShare
from vss import is_valid, open_secret, share_secret

params = VSSParams.secp256k1()
backend = params.backend
field = params.field

def test_scalar_serialization():
    x = field.random()
    s = scalar_to_hex(x)
    assert len(s) == 64
    assert s == s.lower()
    assert scalar_from_hex(field, s) == x

def test_point_serialization():
    A = backend.random_point()
    s = point_to_hex(backend, A)
    assert len(s) == 66
    assert backend.eq(point_from_hex(backend, s), A)

def test_share_serialization():
    share = Share(field.random_nonzero(), field.random())
    s = share_to_hex(share)
    assert len(s) == 128
    assert share_from_hex(field, s) == share

def test_verifiable_share_serialization():
    vshare = VerifiableShare(field.random_nonzero(), field.random(), field.random())
    s = vshare_to_hex(vshare)
    assert len(s) == 192
    assert s[:64] == vshare.index.hex()
    assert s[64:128] == vshare.value.hex()
    assert s[128:] == vshare.decommitment.hex()
    assert vshare_from_hex(field, s) == vshare

def test_commitment_serialization():
    c = [backend.random_point() for _ in range(3)]
    s = commitment_to_hex(backend, c)
    assert len(s) == 3 * 66
    c2 = commitment_from_hex(backend, s)
    assert len(c2) == 3
    for A, B in zip(c, c2):
        assert backend.eq(A, B)

def test_serialized_sharing_still_verifies():
    secret = field.random()
    indices = [field(i) for i in range(1, 6)]
    vshares, c = share_secret(params, indices, secret, 3)
    c = commitment_from_hex(backend, commitment_to_hex(backend, c))
    vshares = [vshare_from_hex(field, vshare_to_hex(v)) for v in vshares]
    for vshare in vshares:
        assert is_valid(params, c, vshare)
    assert open_secret(vshares[2:]) == secret

def test_scalar_decode_errors():
    for s in ['', '00', '0' * 63 + 'z', 'f' * 64, 42]:
        with pytest.raises(DecodeError):
            scalar_from_hex(field, s)

def test_point_decode_errors():
    good = point_to_hex(backend, backend.random_point())
    for s in ['', good[:-2], good + '00', '04' + good[2:], 'zz' + good[2:], '00' * 33, None]:
        with pytest.raises(DecodeError):
            point_from_hex(backend, s)

def test_share_decode_errors():
    good = vshare_to_hex(VerifiableShare(field(1), field(2), field(3)))
    for s in ['', good[:-1], good + '0', good[:-1] + 'x', None]:
        with pytest.raises(DecodeError):
            vshare_from_hex(field, s)
        with pytest.raises(DecodeError):
            share_from_hex(field, s)
    # zero index
    with pytest.raises(DecodeError):
        vshare_from_hex(field, '0' * 64 + good[64:])
    with pytest.raises(DecodeError):
        share_from_hex(field, '0' * 64 + good[64:128])

def test_commitment_decode_errors():
    good = commitment_to_hex(backend, [backend.random_point() for _ in range(2)])
    for s in ['', good[:-1], good + '02', good[:66] + '05' + good[68:], None]:
        with pytest.raises(DecodeError):
            commitment_from_hex(backend, s)
