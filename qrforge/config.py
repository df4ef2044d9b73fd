import os
import re
from dataclasses import dataclass, fields, replace

from .exceptions import InvalidColorError, RenderOptionsError

DEFAULT_EC_LEVEL = 'M'

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


@dataclass(frozen=True)
class RenderOptions:
    module_size: int = 10
    margin: int = 4
    dark_color: str = '#000000'
    light_color: str = '#ffffff'

    def __post_init__(self):
        if not _is_integer(self.module_size) or self.module_size < 1:
            raise RenderOptionsError('module_size must be a positive integer')
        if not _is_integer(self.margin) or self.margin < 0:
            raise RenderOptionsError('margin must be a non-negative integer')
        for color in (self.dark_color, self.light_color):
            if not isinstance(color, str) or not HEX_COLOR.match(color):
                raise InvalidColorError(color)

    @classmethod
    def from_env(cls):
        defaults = cls()
        return cls(
            module_size=_as_int(os.getenv('QRFORGE_MODULE_SIZE'), defaults.module_size, minimum=1),
            margin=_as_int(os.getenv('QRFORGE_MARGIN'), defaults.margin, minimum=0),
            dark_color=_as_color(os.getenv('QRFORGE_DARK_COLOR'), defaults.dark_color),
            light_color=_as_color(os.getenv('QRFORGE_LIGHT_COLOR'), defaults.light_color),
        )


def resolve_options(options=None, **overrides):
    '''
    Accepts a RenderOptions, a mapping of its field names, or None, and
    applies keyword overrides that are not None on top
    '''

    if options is None:
        resolved = RenderOptions()
    elif isinstance(options, RenderOptions):
        resolved = options
    else:
        known = {field.name for field in fields(RenderOptions)}
        unknown = set(options) - known
        if unknown:
            raise RenderOptionsError('Unknown render options: %s' % ', '.join(sorted(unknown)))
        resolved = RenderOptions(**options)

    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(resolved, **changes) if changes else resolved


def default_ec_level():
    return (os.getenv('QRFORGE_EC_LEVEL') or DEFAULT_EC_LEVEL).strip().upper()


def _is_integer(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _as_int(value, default, minimum):
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def _as_color(value, default):
    value = (value or '').strip()
    return value if HEX_COLOR.match(value) else default
