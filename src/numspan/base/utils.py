from functools import reduce

from .errors import EmptyInputError


# ----------------------------------------------------------------------------------------------------------------------
# Reductions

def minimum(*elements):
    '''
    Return the smallest of the passed ``elements``.

    In contrast to the ``min`` builtin, the elements are passed as positional
    arguments only, and calling the function without any raises an
    :class:`EmptyInputError`.
    '''
    if not elements:
        raise EmptyInputError('minimum() requires at least one argument.')
    return reduce(lambda x, y: y if y < x else x, elements)


def maximum(*elements):
    '''
    Return the largest of the passed ``elements``.

    Raises an :class:`EmptyInputError` if no elements are given.
    '''
    if not elements:
        raise EmptyInputError('maximum() requires at least one argument.')
    return reduce(lambda x, y: y if y > x else x, elements)
