class QRError(Exception):
    pass


class InvalidECLevelError(QRError, ValueError):
    def __init__(self, ec_level):
        self.ec_level = ec_level
        super().__init__('Invalid EC level %r. Use L, M, Q, or H' % (ec_level,))


class TextTooLongError(QRError, ValueError):
    def __init__(self, ec_level, needed_bits, available_bits):
        self.ec_level = ec_level
        self.needed_bits = needed_bits
        self.available_bits = available_bits
        super().__init__(
            'Text too long for QR versions 1-10 at EC level %s '
            '(%d bits needed, at most %d available)' % (ec_level, needed_bits, available_bits)
        )


class EmptyTextError(QRError, ValueError):
    def __init__(self):
        super().__init__('text is required')


class EncodingModeError(QRError, ValueError):
    pass


class InvalidMaskError(QRError, ValueError):
    def __init__(self, mask):
        self.mask = mask
        super().__init__('Invalid mask %r. Use an integer from 0 to 7' % (mask,))


class RenderOptionsError(QRError, ValueError):
    pass


class InvalidColorError(RenderOptionsError):
    def __init__(self, color):
        self.color = color
        super().__init__('Invalid color %r. Use #rgb or #rrggbb' % (color,))
