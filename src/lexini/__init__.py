"""This package parses INI text into a two-level mapping of sections and keys.

    >>> import lexini
    >>> ini = lexini.parse('''
    ... [greeting]
    ... early=morning
    ... late=night
    ... ''')
    >>> ini["greeting"]["early"]
    'morning'

Keys declared before any section header go into the default section, named "".

Names and values are either bare (ASCII letters, digits and '_./-') or double-quoted:

    ; comments start with ';' or '#'
    name = "John Doe"  # inline comments work too

    ["section with spaces"]
    path = ./data/payroll.dat

Each section header and key must be on its own line.
"""

from .exceptions import IniError, LexError, ParseError
from .ini import DEFAULT_SECTION, Ini, Section
from .loader import load, loadb, loads
from .parser import parse
