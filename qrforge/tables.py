'''
Static lookup tables for QR Code Model 2, versions 1 to 10 (ISO/IEC 18004)
'''

MIN_VERSION = 1
MAX_VERSION = 10

EC_LEVELS = ('L', 'M', 'Q', 'H')

# Two bits written into the format information for every level
EC_LEVEL_BITS = {'L': 0b01, 'M': 0b00, 'Q': 0b11, 'H': 0b10}

# (ec codewords per block, ((block count, data codewords per block), ...))
# Short blocks always come first
EC_BLOCKS = {
    1: {'L': (7, ((1, 19),)),
        'M': (10, ((1, 16),)),
        'Q': (13, ((1, 13),)),
        'H': (17, ((1, 9),))},
    2: {'L': (10, ((1, 34),)),
        'M': (16, ((1, 28),)),
        'Q': (22, ((1, 22),)),
        'H': (28, ((1, 16),))},
    3: {'L': (15, ((1, 55),)),
        'M': (26, ((1, 44),)),
        'Q': (18, ((2, 17),)),
        'H': (22, ((2, 13),))},
    4: {'L': (20, ((1, 80),)),
        'M': (18, ((2, 32),)),
        'Q': (26, ((2, 24),)),
        'H': (16, ((4, 9),))},
    5: {'L': (26, ((1, 108),)),
        'M': (24, ((2, 43),)),
        'Q': (18, ((2, 15), (2, 16))),
        'H': (22, ((2, 11), (2, 12)))},
    6: {'L': (18, ((2, 68),)),
        'M': (16, ((4, 27),)),
        'Q': (24, ((4, 19),)),
        'H': (28, ((4, 15),))},
    7: {'L': (20, ((2, 78),)),
        'M': (18, ((4, 31),)),
        'Q': (18, ((2, 14), (4, 15))),
        'H': (26, ((4, 13), (1, 14)))},
    8: {'L': (24, ((2, 97),)),
        'M': (22, ((2, 38), (2, 39))),
        'Q': (22, ((4, 18), (2, 19))),
        'H': (26, ((4, 14), (2, 15)))},
    9: {'L': (30, ((2, 116),)),
        'M': (22, ((3, 36), (2, 37))),
        'Q': (20, ((4, 16), (4, 17))),
        'H': (24, ((4, 12), (4, 13)))},
    10: {'L': (18, ((2, 68), (2, 69))),
         'M': (26, ((4, 43), (1, 44))),
         'Q': (24, ((6, 19), (2, 20))),
         'H': (28, ((6, 15), (2, 16)))},
}

# Centre coordinates of alignment patterns, used for both rows and columns
ALIGNMENT_POSITIONS = {
    1: (),
    2: (6, 18),
    3: (6, 22),
    4: (6, 26),
    5: (6, 30),
    6: (6, 34),
    7: (6, 22, 38),
    8: (6, 24, 42),
    9: (6, 26, 46),
    10: (6, 28, 50),
}

# Light modules left over after the last codeword
REMAINDER_BITS = {1: 0, 2: 7, 3: 7, 4: 7, 5: 7, 6: 7, 7: 0, 8: 0, 9: 0, 10: 0}

ALPHANUMERIC_CHARS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:'
ALPHANUMERIC_TABLE = {char: index for index, char in enumerate(ALPHANUMERIC_CHARS)}


def symbol_size(version):
    return 17 + 4 * version


def ec_codewords_per_block(version, ec_level):
    return EC_BLOCKS[version][ec_level][0]


def block_groups(version, ec_level):
    return EC_BLOCKS[version][ec_level][1]


def data_codewords(version, ec_level):
    '''
    Number of data codewords a symbol of this version and level carries
    '''

    return sum(count * length for count, length in block_groups(version, ec_level))


def total_codewords(version, ec_level='L'):
    '''
    Data plus error correction codewords. Does not depend on the level,
    the argument only picks which row of the table is summed.
    '''

    blocks = sum(count for count, _ in block_groups(version, ec_level))
    return data_codewords(version, ec_level) + blocks * ec_codewords_per_block(version, ec_level)
