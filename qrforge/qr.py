import logging
from dataclasses import dataclass

from . import exceptions as _exceptions
from .correction import compute_ec_codewords
from .encoding import MODE_NAMES, build_data_codewords, check_ec_level, select_encoding
from .matrix import assemble_matrix
from .render import qr_to_ascii, qr_to_matrix, qr_to_png, qr_to_svg, qr_to_svg_optimized
from .tables import symbol_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QRSymbol:
    version: int
    size: int
    ec_level: str
    mask: int
    modules: tuple

    def as_dict(self):
        return {
            'version': self.version,
            'size': self.size,
            'ecLevel': self.ec_level,
            'mask': self.mask,
            'modules': [list(row) for row in self.modules],
        }


def normalize_ec_level(ec_level):
    if ec_level is None:
        return 'M'
    if not isinstance(ec_level, str):
        raise _exceptions.InvalidECLevelError(ec_level)

    normalized = ec_level.strip().upper()
    check_ec_level(normalized)
    return normalized


class QRcode:
    '''
    Runs the whole pipeline on construction and keeps every intermediate
    result around for inspection. `mask` forces a mask pattern instead of
    picking the one with the lowest penalty.
    '''

    class exceptions:
        QRError = _exceptions.QRError
        InvalidECLevelError = _exceptions.InvalidECLevelError
        TextTooLongError = _exceptions.TextTooLongError
        EmptyTextError = _exceptions.EmptyTextError
        EncodingModeError = _exceptions.EncodingModeError
        InvalidMaskError = _exceptions.InvalidMaskError

    def __init__(self, data, ec_level='M', mode=None, mask=None):
        self.data = data
        self.ec_level = normalize_ec_level(ec_level)

        # Step 1 - Choosing the mode and the smallest version that fits
        self.mode, self.version = select_encoding(self.data, self.ec_level, mode)

        # Step 2 - Encoding the data and filling it up to the capacity
        self.data_codewords = build_data_codewords(self.data, self.mode, self.version, self.ec_level)

        # Step 3 - Correction bytes per block, interleaved with the data
        self.codewords = compute_ec_codewords(self.data_codewords, self.version, self.ec_level)

        # Step 4 - Placement of information on the QR code
        modules, self.mask = assemble_matrix(self.codewords, self.version, self.ec_level, mask)

        self.symbol = QRSymbol(
            version=self.version,
            size=symbol_size(self.version),
            ec_level=self.ec_level,
            mask=self.mask,
            modules=modules,
        )

        logger.debug('Encoded %d characters as %s: version %d-%s, mask %d',
                     len(self.data), MODE_NAMES[self.mode], self.version, self.ec_level, self.mask)

    @property
    def size(self):
        return self.symbol.size

    @property
    def modules(self):
        return self.symbol.modules

    def matrix(self):
        return qr_to_matrix(self.symbol)

    def ascii(self):
        return qr_to_ascii(self.symbol)

    def svg(self, options=None, optimized=True, **overrides):
        render = qr_to_svg_optimized if optimized else qr_to_svg
        return render(self.symbol, options, **overrides)

    def save(self, fp, options=None, **overrides):
        qr_to_png(self.symbol, fp, options, **overrides)


def generate_qr(text, ec_level='M', mode=None, mask=None):
    return QRcode(text, ec_level=ec_level, mode=mode, mask=mask).symbol
