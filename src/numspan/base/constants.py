sepcomma = ','

# ----------------------------------------------------------------------------------------------------------------------
# Rendering glyphs

class SYMBOL:
    INFTY = '∞'
    NINFTY = '-∞'
    PINFTY = '+∞'
    EMPTYSET = '∅'
    LT = '<'
    GT = '>'
    LTE = '<='
    GTE = '>='
    EQ = '='
    MID = '|'


# ----------------------------------------------------------------------------------------------------------------------
# Notations understood by Interval.pfmt()

NOTATION_PAR = 'par'  # (0,9]
NOTATION_SQ = 'sq'    # ]0,9]
NOTATION_SET = 'set'  # {x | 0 < x <= 9}

NOTATIONS = (NOTATION_PAR, NOTATION_SQ, NOTATION_SET)

DEFAULT_NOTATION = NOTATION_PAR

# The variable name used in set-builder notation
SET_VARIABLE = 'x'

# String of the empty interval, in every notation
STR_EMPTY = '{}'
