class VSSError(Exception):
    pass

class ThresholdTooLarge(VSSError, ValueError):
    def __init__(self, k, n):
        super().__init__(f'reconstruction threshold too large: expected k <= {n}, got k = {k}')
        self.k = k
        self.n = n

class DecodeError(VSSError, ValueError):
    pass

# Raised when calling code breaks a documented contract (zero index,
# empty polynomial, inverse of zero, ...), as opposed to bad input data.
class PreconditionViolation(VSSError, ValueError):
    pass

class GroupError(VSSError):
    pass
