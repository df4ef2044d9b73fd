'''
Module placement: function patterns, the zigzag data path, format and version
information, and mask selection.

Grids are lists of rows. 1 is a dark module, 0 a light one and None a module
that has not been assigned yet (only used while building the function patterns).
'''

import logging

from .exceptions import InvalidMaskError
from .masking import MASK_PATTERNS, apply_mask, penalty_score
from .tables import ALIGNMENT_POSITIONS, EC_LEVEL_BITS, REMAINDER_BITS, symbol_size

logger = logging.getLogger(__name__)

# x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
FORMAT_GENERATOR = 0b10100110111
FORMAT_XOR_MASK = 0b101010000010010

# x^12 + x^11 + x^10 + x^9 + x^8 + x^5 + x^2 + 1
VERSION_GENERATOR = 0b1111100100101


def _bch_remainder(data, generator, degree):
    remainder = data << degree
    for shift in range(remainder.bit_length() - 1, degree - 1, -1):
        if remainder & (1 << shift):
            remainder ^= generator << (shift - degree)
    return remainder


def format_bits(ec_level, mask):
    '''
    15-bit format information: 2 bits of level, 3 bits of mask, 10 BCH bits,
    XORed with 101010000010010 so it is never all zeros
    '''

    data = (EC_LEVEL_BITS[ec_level] << 3) | mask
    return ((data << 10) | _bch_remainder(data, FORMAT_GENERATOR, 10)) ^ FORMAT_XOR_MASK


def version_bits(version):
    '''
    18-bit version information (6 bits of version, 12 BCH bits), versions 7 and up
    '''

    return (version << 12) | _bch_remainder(version, VERSION_GENERATOR, 12)


class FunctionPatterns:
    '''
    Everything in a symbol of the given version that does not carry data.
    Format areas are reserved with light placeholders, they are written once
    the mask is known.
    '''

    def __init__(self, version):
        self.version = version
        self.size = symbol_size(version)
        self.grid = [[None] * self.size for _ in range(self.size)]

        self.add_finder_patterns()
        self.add_timing_patterns()
        self.add_alignment_patterns()
        self.add_dark_module()
        self.reserve_format_areas()
        self.add_version_information()

    def is_reserved(self, row, col):
        return self.grid[row][col] is not None

    def _set(self, row, col, value):
        if 0 <= row < self.size and 0 <= col < self.size:
            self.grid[row][col] = value

    def add_finder_patterns(self):
        '''
        Three 7x7 squares in the corners, each with a light separator around it
        '''

        corners = [(0, 0), (0, self.size - 7), (self.size - 7, 0)]

        for top, left in corners:
            for dy in range(-1, 8):
                for dx in range(-1, 8):
                    on_ring = (0 <= dy <= 6 and dx in (0, 6)) or (0 <= dx <= 6 and dy in (0, 6))
                    in_center = 2 <= dy <= 4 and 2 <= dx <= 4
                    self._set(top + dy, left + dx, int(on_ring or in_center))

    def add_timing_patterns(self):
        for index in range(8, self.size - 8):
            value = int(index % 2 == 0)
            self.grid[6][index] = value
            self.grid[index][6] = value

    def add_alignment_patterns(self):
        coords = ALIGNMENT_POSITIONS[self.version]
        if not coords:
            return

        first, last = coords[0], coords[-1]
        places = [(row, col) for row in coords for col in coords]
        # These would sit on top of the finder patterns
        for corner in ((first, first), (first, last), (last, first)):
            places.remove(corner)

        for row, col in places:
            for dy in range(-2, 3):
                for dx in range(-2, 3):
                    value = int(max(abs(dy), abs(dx)) != 1)
                    self.grid[row + dy][col + dx] = value

    def add_dark_module(self):
        self.grid[4 * self.version + 9][8] = 1

    def reserve_format_areas(self):
        for index in range(9):
            if self.grid[8][index] is None:
                self.grid[8][index] = 0
            if self.grid[index][8] is None:
                self.grid[index][8] = 0

        for index in range(8):
            if self.grid[8][self.size - 1 - index] is None:
                self.grid[8][self.size - 1 - index] = 0
            if self.grid[self.size - 1 - index][8] is None:
                self.grid[self.size - 1 - index][8] = 0

    def add_version_information(self):
        '''
        Starting from version 7 there are two 6x3 blocks near the bottom-left
        and top-right corners holding the version number
        '''

        if self.version < 7:
            return

        bits = version_bits(self.version)
        for index in range(18):
            bit = (bits >> index) & 1
            a = self.size - 11 + index % 3
            b = index // 3
            self.grid[b][a] = bit
            self.grid[a][b] = bit

    def copy_grid(self):
        return [list(row) for row in self.grid]


def zigzag_positions(patterns):
    '''
    Yields the (row, col) of every data module in placement order: pairs of
    columns from the right edge, alternating upwards and downwards, skipping
    the vertical timing pattern and reserved modules
    '''

    size = patterns.size
    upward = True
    col = size - 1

    while col > 0:
        if col == 6:  # Skip the vertical timing pattern
            col -= 1

        rows = range(size - 1, -1, -1) if upward else range(size)
        for row in rows:
            for current in (col, col - 1):
                if not patterns.is_reserved(row, current):
                    yield row, current

        upward = not upward
        col -= 2


def codewords_to_bits(codewords):
    return [(codeword >> shift) & 1 for codeword in codewords for shift in range(7, -1, -1)]


def write_format_information(grid, ec_level, mask):
    size = len(grid)
    code = format(format_bits(ec_level, mask), '015b')

    # Around the top-left finder
    for index in range(6):
        grid[8][index] = int(code[index])

    grid[8][7] = int(code[6])
    grid[8][8] = int(code[7])
    grid[7][8] = int(code[8])

    for index in range(9, 15):
        grid[14 - index][8] = int(code[index])

    # Split between the bottom-left and top-right finders
    for index in range(7):
        grid[size - index - 1][8] = int(code[index])

    for index in range(7, 15):
        grid[8][size + index - 15] = int(code[index])


def build_candidate(grid, positions, ec_level, mask):
    candidate = apply_mask(grid, positions, mask)
    write_format_information(candidate, ec_level, mask)
    return candidate


def choose_mask(grid, positions, ec_level):
    '''
    Mask with the lowest penalty, ties go to the lowest mask number
    '''

    scores = [penalty_score(build_candidate(grid, positions, ec_level, mask))
              for mask in range(len(MASK_PATTERNS))]

    logger.debug('Mask penalties: %s', scores)

    return scores.index(min(scores))


def assemble_matrix(codewords, version, ec_level, mask=None):
    '''
    Places the final codewords into a symbol and masks it.
    Returns (modules, mask) with modules a tuple of rows of booleans.
    '''

    if mask is not None and (isinstance(mask, bool) or not isinstance(mask, int)
                             or not 0 <= mask < len(MASK_PATTERNS)):
        raise InvalidMaskError(mask)

    patterns = FunctionPatterns(version)
    positions = list(zigzag_positions(patterns))
    bits = codewords_to_bits(codewords)
    assert len(bits) + REMAINDER_BITS[version] == len(positions), \
        '%d bits do not fill %d data modules' % (len(bits), len(positions))

    grid = patterns.copy_grid()
    for index, (row, col) in enumerate(positions):
        # Remainder bits are light
        grid[row][col] = bits[index] if index < len(bits) else 0

    if mask is None:
        mask = choose_mask(grid, positions, ec_level)

    final = build_candidate(grid, positions, ec_level, mask)
    modules = tuple(tuple(value == 1 for value in row) for row in final)

    return modules, mask
