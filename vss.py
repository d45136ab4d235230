"""
Pedersen verifiable secret sharing.

The dealer shares a secret with a random value polynomial a(x) and commits
to it, coefficient by coefficient, blinded by a second random polynomial
b(x):

    c_i = a_i*G + b_i*H

Party holding (x, a(x), b(x)) checks its share by evaluating the committed
polynomial at x "in the exponent":

    a(x)*G + b(x)*H == sum_i x^i * c_i

which never needs the coefficients themselves.
"""

import logging

from errors import PreconditionViolation, VSSError
from shamir import poly_eval, random_coeffs, recover_secret, share_and_get_coeffs
from shares import Commitment, VerifiableShare

def evaluate_in_exponent(backend, commitment, x):
    if not commitment:
        raise PreconditionViolation('cannot evaluate an empty commitment')
    # Horner's rule, with scalar multiplication and point addition
    acc = commitment[-1]
    for c_i in reversed(commitment[:-1]):
        acc = backend.add(backend.scale(acc, x), c_i)
    return acc

def share_secret(params, indices, secret, k):
    """
    Create verifiable shares of the secret, one per index, any k of which
    reconstruct it, together with the commitment they verify against.

    Raises:
        ThresholdTooLarge: If k exceeds the number of indices. No shares
            or commitment are produced.
        PreconditionViolation: On a zero or repeated index, or k < 1.
    """
    backend = params.backend
    shares, coeffs = share_and_get_coeffs(indices, secret, k)
    c = [backend.base_exp(a_i) for a_i in coeffs]

    # The blinding polynomial gets its own random constant term
    coeffs = random_coeffs(params.field.random(), k)
    vshares = [VerifiableShare(s.index, s.value, poly_eval(coeffs, s.index)) for s in shares]

    # Finish the commitment: c_i = a_i*G + b_i*H
    c = [backend.add(c_i, backend.scale(params.h, b_i)) for c_i, b_i in zip(c, coeffs)]

    logging.debug(f'Created {len(vshares)} verifiable shares with threshold {k}')
    return vshares, Commitment(c)

def is_valid(params, commitment, vshare):
    """Return True iff vshare is consistent with the commitment."""
    backend = params.backend
    try:
        if not isinstance(vshare, VerifiableShare):
            raise PreconditionViolation(f'expected a VerifiableShare, got {type(vshare).__name__}')
        lhs =backend.add(backend.base_exp(vshare.value), backend.scale(params.h, vshare.decommitment))
        rhs = evaluate_in_exponent(backend, commitment, vshare.index)
        return backend.eq(lhs, rhs)
    except VSSError as e:
        logging.debug(f'Rejecting share: {e}')
        return False

def open_secret(vshares):
    return recover_secret(vshares)
