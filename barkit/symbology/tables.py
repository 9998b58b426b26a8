"""
Static lookup tables for the EAN/UPC family and Code39.

EAN digit patterns come in three sets, indexed by digit:
- L: left half, odd parity
- G: left half, even parity
- R: right half
"""

L_CODES = (
    "0001101",
    "0011001",
    "0010011",
    "0111101",
    "0100011",
    "0110001",
    "0101111",
    "0111011",
    "0110111",
    "0001011",
)

G_CODES = (
    "0100111",
    "0110011",
    "0011011",
    "0100001",
    "0011101",
    "0111001",
    "0000101",
    "0010001",
    "0001001",
    "0010111",
)

R_CODES = (
    "1110010",
    "1100110",
    "1101100",
    "1000010",
    "1011100",
    "1001110",
    "1010000",
    "1000100",
    "1001000",
    "1110100",
)

EAN_CODES = {"L": L_CODES, "G": G_CODES, "R": R_CODES}

EAN_LEFT_GUARD = "101"
EAN_CENTER_GUARD = "01010"
EAN_RIGHT_GUARD = "101"

# Left-half parity for EAN-13, selected by the leading (number system) digit
EAN13_PARITY = (
    "LLLLLL",
    "LLGLGG",
    "LLGGLG",
    "LLGGGL",
    "LGLLGG",
    "LGGLLG",
    "LGGGLL",
    "LGLGLG",
    "LGLGGL",
    "LGGLGL",
)

SUPPLEMENTAL_GUARD = "1011"
SUPPLEMENTAL_SEPARATOR = "01"

# EAN-2 parity, selected by value mod 4
EAN2_PARITY = ("LL", "LG", "GL", "GG")

# EAN-5 parity, selected by the add-on check value
EAN5_PARITY = (
    "GGLLL",
    "GLGLL",
    "GLLGL",
    "GLLLG",
    "LGGLL",
    "LLGGL",
    "LLLGG",
    "LGLGL",
    "LGLLG",
    "LLGLG",
)

# Code39: character -> (mod-43 value, 9 elements B S B S B S B S B, 1 = wide)
CODE39_START_STOP = "*"
CODE39_START_STOP_PATTERN = "010010100"
CODE39_GAP = "0"

CODE39_TABLE = {
    "0": (0, "000110100"),
    "1": (1, "100100001"),
    "2": (2, "001100001"),
    "3": (3, "101100000"),
    "4": (4, "000110001"),
    "5": (5, "100110000"),
    "6": (6, "001110000"),
    "7": (7, "000100101"),
    "8": (8, "100100100"),
    "9": (9, "001100100"),
    "A": (10, "100001001"),
    "B": (11, "001001001"),
    "C": (12, "101001000"),
    "D": (13, "000011001"),
    "E": (14, "100011000"),
    "F": (15, "001011000"),
    "G": (16, "000001101"),
    "H": (17, "100001100"),
    "I": (18, "001001100"),
    "J": (19, "000011100"),
    "K": (20, "100000011"),
    "L": (21, "001000011"),
    "M": (22, "101000010"),
    "N": (23, "000010011"),
    "O": (24, "100010010"),
    "P": (25, "001010010"),
    "Q": (26, "000000111"),
    "R": (27, "100000110"),
    "S": (28, "001000110"),
    "T": (29, "000010110"),
    "U": (30, "110000001"),
    "V": (31, "011000001"),
    "W": (32, "111000000"),
    "X": (33, "010010001"),
    "Y": (34, "110010000"),
    "Z": (35, "011010000"),
    "-": (36, "010000101"),
    ".": (37, "110000100"),
    " ": (38, "011000100"),
    "$": (39, "010101000"),
    "/": (40, "010100010"),
    "+": (41, "010001010"),
    "%": (42, "000101010"),
}

# Reverse lookup for the mod-43 check character
CODE39_BY_VALUE = {value: char for char, (value, _) in CODE39_TABLE.items()}

DIGITS = "0123456789"
CODE39_ALPHABET = "".join(CODE39_TABLE)
