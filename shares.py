from collections import namedtuple

class Share(namedtuple('Share', ['index', 'value'])):
    """A point (index, f(index)) on a sharing polynomial. index is never 0."""
    __slots__ = ()

class VerifiableShare(namedtuple('VerifiableShare', ['index', 'value', 'decommitment'])):
    """
    A Share together with the blinding polynomial evaluated at the same
    index, which lets it be checked against a Commitment.
    """
    __slots__ = ()

    @property
    def share(self):
        return Share(self.index, self.value)

# Position i commits to the i-th coefficients of the value and blinding
# polynomials: c[i] = a_i*G + b_i*H
class Commitment(tuple):
    __slots__ = ()

    def __repr__(self):
        return f'Commitment(k={len(self)})'
