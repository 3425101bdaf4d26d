""" exceptions and warnings raised while building and sampling choice sets
"""

class ChoiceSetError(Exception):
    """ base class for errors raised by choiceset
    """

class InvalidArityError(ChoiceSetError, ValueError):
    """ a pair or triplet factory got a number of values that doesn't divide
    into complete entries
    """
    def __init__(self, arity, count, factory=None):
        self.arity = arity
        self.count = count
        self.factory = factory
        
        name = factory or 'factory'
        super(InvalidArityError, self).__init__(f'{name} needs a multiple of '
            f'{arity} values, got {count}')

class InvalidWeightError(ChoiceSetError, ValueError):
    """ a weight that is negative, infinite, NaN or not a number
    """
    def __init__(self, weight, name=None):
        self.weight = weight
        self.name = name
        super(InvalidWeightError, self).__init__(f'invalid weight for '
            f'{name!r}: {weight!r}')

class SamplingInvariantError(ChoiceSetError, RuntimeError):
    """ a draw didn't fall within any interval, so nothing could be selected
    
    This only happens for empty sets, sets where every weight is zero, or draws
    outside [0, total weight).
    """

class WeightMismatchWarning(UserWarning):
    """ a list of replacement weights didn't match the number of choices
    """
