import re

# Punctuation stripped anywhere in a record before it is split into words
SYMBOLS = re.compile(r';|\.|,|\?|!|"|:')


def remove_symbols(text):
    return SYMBOLS.sub('', text)


def tokenize(text):
    """
    Lowercase, drop punctuation and split on runs of whitespace.

    >>> tokenize('The cat sat on the Mat.')
    ['the', 'cat', 'sat', 'on', 'the', 'mat']
    """
    return remove_symbols(text).lower().split()
