"""
Deterministic BIC grammar rules (ISO 9362:2014).

This file exists to make the fixed layout explicit and enforceable:

    business-identifier-code  := business-party-identifier [ branch-identifier ]
    business-party-identifier := prefix country suffix
    prefix  := 4alnum
    country := 2alpha
    suffix  := 2alnum
    branch  := 3alnum
"""

import string

# Field offsets into the 8 or 11 character code.
PREFIX_START, PREFIX_END = 0, 4
COUNTRY_START, COUNTRY_END = 4, 6
SUFFIX_START, SUFFIX_END = 6, 8
BRANCH_START, BRANCH_END = 8, 11

LENGTH = SUFFIX_END  # without branch
EXTENDED_LENGTH = BRANCH_END  # with branch

ALPHA = frozenset(string.ascii_uppercase)
ALNUM = frozenset(string.ascii_uppercase + string.digits)

PRIMARY_BRANCH = "XXX"

# Test & Training codes carry a "0" in the last suffix position.
TEST_MARKER_INDEX = 7
TEST_MARKER = "0"

PATTERN = r"^[A-Z0-9]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?$"

# Well-known reference codes.
BANK_OF_GERMANY = "MARKDEFF"
BANK_OF_GERMANY_TEST = "MARKDEF0"
N26 = "NTSBDEB1"
N26_TEST = "NTSBDEB0"
