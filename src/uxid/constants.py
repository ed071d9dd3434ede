"""Global constants for UXID generation and parsing.

Values here define the wire format and must never change between releases:
identifiers generated by one version have to decode with every other.
"""

# Separates an optional prefix from the encoded body
DELIMITER = "_"

# Crockford-style alphabet: digits plus uppercase letters without I, L, O, U
ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

# Bits carried by a single alphabet symbol
SYMBOL_BITS = 5

# Timestamp layout: 3 leading bits + 9 * 5 bits = 48 bits in 10 symbols
TIME_BITS = 48
TIME_LEAD_BITS = 3
TIME_ENCODED_LENGTH = 10
MAX_TIME = (1 << TIME_BITS) - 1

# Random byte count used when neither rand_size nor size is supplied
DEFAULT_RAND_SIZE = 10
