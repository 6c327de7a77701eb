class InvalidBoundsError(ValueError):
    '''Error that is raised if the two points of an interval are not in proper order.'''

    def __init__(self, msg: str = None, lower=None, upper=None):
        super().__init__(msg)
        self.lower = lower
        self.upper = upper


class EmptyInputError(ValueError):
    '''Error that is raised if a reduction like ``minimum()`` gets no arguments.'''


class DomainError(ValueError):
    '''Error that is raised if a value is not a member of a numeric domain.'''


class ParseError(ValueError):
    '''Error that is raised on strings that do not represent an interval.'''
