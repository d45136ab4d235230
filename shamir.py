import logging

from errors import PreconditionViolation, ThresholdTooLarge
from shares import Share

def random_coeffs(secret, k):
    """
    Coefficients of a random polynomial of degree k - 1 whose constant
    term is the given secret.
    """
    if k < 1:
        raise PreconditionViolation(f'a polynomial needs at least 1 coefficient, got k = {k}')
    field = secret.field
    coeffs = [secret]
    for i in range(k - 1):
        coeffs.append(field.random())
    return coeffs

def poly_eval(coeffs, x):
    if not coeffs:
        raise PreconditionViolation('cannot evaluate a polynomial with no coefficients')
    # Horner's rule
    y = coeffs[-1]
    for c_i in reversed(coeffs[:-1]):
        y = y * x + c_i
    return y

def lagrange(T, i):
    """Lagrange coefficient at zero for index i within the index set T."""
    num = i.field.one()
    denom = i.field.one()
    for j in T:
        if j != i:
            num = num * j
            denom = denom * (j - i)
    return num * denom.inverse()

def check_indices(indices, k):
    seen = set()
    for index in indices:
        if index.is_zero():
            raise PreconditionViolation('cannot create share for index zero')
        if index in seen:
            raise PreconditionViolation(f'duplicate share index {index.hex()}')
        seen.add(index)
    if k < 1:
        raise PreconditionViolation(f'reconstruction threshold must be at least 1, got k = {k}')
    if k > len(indices):
        raise ThresholdTooLarge(k, len(indices))

def share_and_get_coeffs(indices, secret, k):
    """
    Shamir-share the secret at the given indices with threshold k.

    Returns the shares together with the coefficients of the sharing
    polynomial (index 0 is the secret), which callers building a
    commitment need.

    Raises:
        ThresholdTooLarge: If k exceeds the number of indices.
        PreconditionViolation: On a zero or repeated index, or k < 1.
    """
    check_indices(indices, k)
    coeffs = random_coeffs(secret, k)
    shares = [Share(index, poly_eval(coeffs, index)) for index in indices]
    return shares, coeffs

def split_secret(indices, secret, k):
    shares, _ = share_and_get_coeffs(indices, secret, k)
    return shares

def recover_secret(shares):
    """
    Interpolate the secret from k or more shares with pairwise distinct
    indices. Shares are trusted: verify them first.
    """
    if not shares:
        raise PreconditionViolation('cannot recover a secret from zero shares')
    T = [share.index for share in shares]
    z = T[0].field.zero()
    for share in shares:
        z = z + lagrange(T, share.index) * share.value
    logging.debug(f'Recovered secret from {len(shares)} shares')
    return z
