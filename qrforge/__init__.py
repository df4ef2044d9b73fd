from .config import RenderOptions
from .encoding import MODE_ALPHANUMERIC, MODE_BYTE, MODE_NUMERIC
from .exceptions import (
    EmptyTextError,
    EncodingModeError,
    InvalidColorError,
    InvalidECLevelError,
    InvalidMaskError,
    QRError,
    RenderOptionsError,
    TextTooLongError,
)
from .qr import QRcode, QRSymbol, generate_qr
from .render import qr_to_ascii, qr_to_image, qr_to_matrix, qr_to_png, qr_to_svg, qr_to_svg_optimized

__version__ = '1.2.0'

__all__ = [
    'EmptyTextError',
    'EncodingModeError',
    'InvalidColorError',
    'InvalidECLevelError',
    'InvalidMaskError',
    'MODE_ALPHANUMERIC',
    'MODE_BYTE',
    'MODE_NUMERIC',
    'QRError',
    'QRSymbol',
    'QRcode',
    'RenderOptions',
    'RenderOptionsError',
    'TextTooLongError',
    'generate_qr',
    'qr_to_ascii',
    'qr_to_image',
    'qr_to_matrix',
    'qr_to_png',
    'qr_to_svg',
    'qr_to_svg_optimized',
]
