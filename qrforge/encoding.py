'''
Mode and version selection, and serialisation of text into data codewords
'''

import logging

from .bits import BitBuffer
from .exceptions import EmptyTextError, EncodingModeError, InvalidECLevelError, TextTooLongError
from .tables import ALPHANUMERIC_TABLE, EC_LEVELS, MAX_VERSION, MIN_VERSION, data_codewords

logger = logging.getLogger(__name__)

MODE_NUMERIC = 0b0001
MODE_ALPHANUMERIC = 0b0010
MODE_BYTE = 0b0100

MODE_NAMES = {
    MODE_NUMERIC: 'numeric',
    MODE_ALPHANUMERIC: 'alphanumeric',
    MODE_BYTE: 'byte',
}

DIGITS = frozenset('0123456789')

# Width of the character count field for versions 1-9, 10-26, 27-40
CHARACTER_COUNT_BITS = {
    MODE_NUMERIC: (10, 12, 14),
    MODE_ALPHANUMERIC: (9, 11, 13),
    MODE_BYTE: (8, 16, 16),
}

PAD_BYTES = (0b11101100, 0b00010001)


def check_ec_level(ec_level):
    if ec_level not in EC_LEVELS:
        raise InvalidECLevelError(ec_level)


def character_count_bits(mode, version):
    if version <= 9:
        tier = 0
    elif version <= 26:
        tier = 1
    else:
        tier = 2
    return CHARACTER_COUNT_BITS[mode][tier]


def detect_mode(text):
    '''
    Cheapest mode that represents the text losslessly
    '''

    if all(char in DIGITS for char in text):
        return MODE_NUMERIC
    if all(char in ALPHANUMERIC_TABLE for char in text):
        return MODE_ALPHANUMERIC
    return MODE_BYTE


def can_encode(text, mode):
    if mode == MODE_NUMERIC:
        return all(char in DIGITS for char in text)
    if mode == MODE_ALPHANUMERIC:
        return all(char in ALPHANUMERIC_TABLE for char in text)
    return mode == MODE_BYTE


def character_count(text, mode):
    if mode == MODE_BYTE:
        return len(text.encode('utf-8'))
    return len(text)


def payload_bit_length(text, mode):
    count = character_count(text, mode)

    if mode == MODE_NUMERIC:
        return 10 * (count // 3) + (0, 4, 7)[count % 3]
    if mode == MODE_ALPHANUMERIC:
        return 11 * (count // 2) + 6 * (count % 2)
    return 8 * count


def encoded_bit_length(text, mode, version):
    '''
    Mode indicator + character count + payload, without terminator and padding
    '''

    return 4 + character_count_bits(mode, version) + payload_bit_length(text, mode)


def select_encoding(text, ec_level, mode=None):
    '''
    Picks the encoding mode (unless one is forced) and the smallest version
    that holds the encoded text at the given error correction level.
    Returns (mode, version).
    '''

    check_ec_level(ec_level)

    if not text:
        raise EmptyTextError()

    if mode is None:
        mode = detect_mode(text)
    elif isinstance(mode, bool) or mode not in MODE_NAMES:
        raise EncodingModeError('Unknown encoding mode %r' % (mode,))
    elif not can_encode(text, mode):
        raise EncodingModeError('Text cannot be encoded in %s mode' % MODE_NAMES[mode])

    count = character_count(text, mode)
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if count >= 1 << character_count_bits(mode, version):
            continue
        if encoded_bit_length(text, mode, version) <= data_codewords(version, ec_level) * 8:
            logger.debug('Selected %s mode, version %d for %d characters at level %s',
                         MODE_NAMES[mode], version, count, ec_level)
            return mode, version

    raise TextTooLongError(ec_level,
                           encoded_bit_length(text, mode, MAX_VERSION),
                           data_codewords(MAX_VERSION, ec_level) * 8)


def write_numeric(buffer, text):
    for start in range(0, len(text), 3):
        group = text[start:start + 3]
        buffer.put(int(group), (0, 4, 7, 10)[len(group)])


def write_alphanumeric(buffer, text):
    for start in range(0, len(text), 2):
        pair = text[start:start + 2]
        if len(pair) == 2:
            buffer.put(45 * ALPHANUMERIC_TABLE[pair[0]] + ALPHANUMERIC_TABLE[pair[1]], 11)
        else:
            buffer.put(ALPHANUMERIC_TABLE[pair], 6)


def write_byte(buffer, text):
    for byte in text.encode('utf-8'):
        buffer.put(byte, 8)


WRITERS = {
    MODE_NUMERIC: write_numeric,
    MODE_ALPHANUMERIC: write_alphanumeric,
    MODE_BYTE: write_byte,
}


def build_data_codewords(text, mode, version, ec_level):
    '''
    Serialises the text and fills it up to exactly the data capacity of the
    symbol: terminator, zero bits up to a byte boundary, then alternating
    bytes 11101100 and 00010001
    '''

    buffer = BitBuffer()
    buffer.put(mode, 4)
    buffer.put(character_count(text, mode), character_count_bits(mode, version))
    WRITERS[mode](buffer, text)

    capacity = data_codewords(version, ec_level)
    capacity_bits = capacity * 8
    assert len(buffer) <= capacity_bits, 'encoded data overflows version %d-%s' % (version, ec_level)

    buffer.put(0, min(4, capacity_bits - len(buffer)))
    buffer.put(0, (8 - len(buffer) % 8) % 8)

    codewords = buffer.to_bytes()

    counter = 0
    while len(codewords) < capacity:
        codewords.append(PAD_BYTES[counter % 2])
        counter += 1

    return codewords
