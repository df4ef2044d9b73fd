import logging

from .galois import rs_remainder
from .tables import block_groups, data_codewords, ec_codewords_per_block

logger = logging.getLogger(__name__)


def split_into_blocks(codewords, version, ec_level):
    '''
    Splits data codewords into the blocks of this version and level.
    Example: version 5-Q, 62 codewords -> blocks of [15, 15, 16, 16]
    '''

    blocks = []
    offset = 0
    for count, length in block_groups(version, ec_level):
        for _ in range(count):
            blocks.append(list(codewords[offset:offset + length]))
            offset += length

    return blocks


def interleave(blocks):
    '''
    <1st byte of block 1><1st byte of block 2>...<2nd byte of block 1>...
    Longer blocks keep contributing after the shorter ones run out.
    '''

    result = []
    longest = max(len(block) for block in blocks)
    for position in range(longest):
        for block in blocks:
            if position < len(block):
                result.append(block[position])

    return result


def compute_ec_codewords(codewords, version, ec_level):
    '''
    Returns the final codeword sequence: interleaved data blocks followed by
    the interleaved Reed-Solomon codewords of those blocks
    '''

    expected = data_codewords(version, ec_level)
    assert len(codewords) == expected, \
        'version %d-%s needs %d data codewords, got %d' % (version, ec_level, expected, len(codewords))

    ec_length = ec_codewords_per_block(version, ec_level)
    data_blocks = split_into_blocks(codewords, version, ec_level)
    correction_blocks = [rs_remainder(block, ec_length) for block in data_blocks]

    logger.debug('Version %d-%s: %d blocks, %d ec codewords each',
                 version, ec_level, len(data_blocks), ec_length)

    return interleave(data_blocks) + interleave(correction_blocks)
