"""
Rule-type constants for the built-in validator catalog.

Use these as the `type` of a rule descriptor instead of string literals so
typos surface as import errors:

    define_field(self, "email", email, [
        {"type": EMAIL, "message": "Invalid email format"}
    ])
"""

# Value is not None.
NOT_NULL = "notNull"

# String, sequence or collection is not None and not empty.
NOT_EMPTY = "notEmpty"

# Value is not None and its trimmed string form is not empty.
NOT_BLANK = "notBlank"

# Value is a valid email address.
EMAIL = "email"

# Value matches the regular expression in params["regex"].
PATTERN = "pattern"

# Numeric value is greater than or equal to params["min"].
MIN = "min"

# Numeric value is less than or equal to params["max"].
MAX = "max"

# Numeric value is within [params["min"], params["max"]].
RANGE = "range"

# Length of a string, sequence or collection is within [min, max].
SIZE = "size"

# String length is within [min, max].
LENGTH = "length"

# Decimal with at most params["integer"] integer and params["fraction"] fraction digits.
DIGITS = "digits"

# Credit card number passing the Luhn checksum.
CREDIT_CARD_NUMBER = "creditCardNumber"

# Sequence contains no duplicate elements.
UNIQUE_ELEMENTS = "uniqueElements"

# Well-formed absolute URL.
URL = "url"

# Decimal amount with an optional currency symbol prefix.
CURRENCY = "currency"

# EAN-8 or EAN-13 barcode.
EAN = "ean"

# ISBN-10 or ISBN-13 code.
ISBN = "isbn"

BUILTIN_RULE_TYPES = frozenset({
    NOT_NULL,
    NOT_EMPTY,
    NOT_BLANK,
    EMAIL,
    PATTERN,
    MIN,
    MAX,
    RANGE,
    SIZE,
    LENGTH,
    DIGITS,
    CREDIT_CARD_NUMBER,
    UNIQUE_ELEMENTS,
    URL,
    CURRENCY,
    EAN,
    ISBN,
})
