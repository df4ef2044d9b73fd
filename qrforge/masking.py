'''
The eight data mask patterns and the penalty rules used to choose between them
'''

from numpy import array as numpy_array, uint8

# A module at (row, col) is inverted when the pattern returns True
MASK_PATTERNS = (
    lambda row, col: (row + col) % 2 == 0,
    lambda row, col: row % 2 == 0,
    lambda row, col: col % 3 == 0,
    lambda row, col: (row + col) % 3 == 0,
    lambda row, col: (row // 2 + col // 3) % 2 == 0,
    lambda row, col: (row * col) % 2 + (row * col) % 3 == 0,
    lambda row, col: ((row * col) % 2 + (row * col) % 3) % 2 == 0,
    lambda row, col: ((row + col) % 2 + (row * col) % 3) % 2 == 0,
)

FINDER_LIKE = ('10111010000', '00001011101')


def apply_mask(grid, positions, mask_number):
    '''
    Returns a copy of grid with the data modules at positions XORed with the mask
    '''

    pattern = MASK_PATTERNS[mask_number]
    masked = [list(row) for row in grid]

    for row, col in positions:
        if pattern(row, col):
            masked[row][col] ^= 1

    return masked


def _row_strings(modules):
    return [''.join(map(str, line)) for line in modules.tolist()]


def score_runs(modules):
    '''
    Rule 1: each run of 5 + k same-coloured modules in a line costs 3 + k
    '''

    score = 0
    for bits in _row_strings(modules):
        black_lengths = [len(i) for i in bits.replace('0', ' ').split()]
        white_lengths = [len(i) for i in bits.replace('1', ' ').split()]

        score += sum(length - 2 for length in black_lengths + white_lengths if length >= 5)

    return score


def score_boxes(modules):
    '''
    Rule 2: 3 points for every 2x2 block of one colour (blocks may overlap)
    '''

    corner = modules[:-1, :-1]
    same = (corner == modules[1:, :-1]) & (corner == modules[:-1, 1:]) & (corner == modules[1:, 1:])
    return 3 * int(same.sum())


def score_finder_like(modules):
    '''
    Rule 3: 40 points for each 1:1:3:1:1 dark pattern with four light modules on one side
    '''

    score = 0
    for bits in _row_strings(modules):
        for start in range(len(bits) - 10):
            if bits.startswith(FINDER_LIKE, start):
                score += 40

    return score


def score_balance(modules):
    '''
    Rule 4: 10 points for every full 5% the dark share deviates from 50%
    '''

    total = modules.size
    dark = int(modules.sum())
    deviation = abs(dark * 100 - total * 50)
    return 10 * (deviation // (total * 5))


def penalty_score(grid):
    modules = numpy_array(grid, dtype=uint8)
    transposed = modules.transpose()

    scores = [
        score_runs(modules),
        score_runs(transposed),
        score_boxes(modules),
        score_finder_like(modules),
        score_finder_like(transposed),
        score_balance(modules),
    ]

    return sum(scores)
