import argparse
import json
import logging
import os
import sys

from .config import RenderOptions, default_ec_level
from .exceptions import QRError
from .qr import QRcode
from .render import qr_to_ascii, qr_to_matrix, qr_to_png, qr_to_svg, qr_to_svg_optimized

logger = logging.getLogger(__name__)

FORMATS = ('svg', 'svg-rects', 'ascii', 'matrix', 'png')


def build_parser():
    parser = argparse.ArgumentParser(prog='qrforge', description='Encode text as a QR code')
    parser.add_argument('text', help='Text to encode')
    parser.add_argument('--ec-level', default=default_ec_level(), help='L, M, Q or H')
    parser.add_argument('--format', choices=FORMATS, default='svg', dest='output_format')
    parser.add_argument('--output', '-o', default=None, help='Write to this file instead of stdout')
    parser.add_argument('--module-size', type=int, default=None, help='Pixels per module')
    parser.add_argument('--margin', type=int, default=None, help='Quiet zone in modules')
    parser.add_argument('--dark', default=None, help='Dark module colour, #rrggbb')
    parser.add_argument('--light', default=None, help='Background colour, #rrggbb')
    parser.add_argument('--mask', type=int, default=None, help='Force a mask pattern (0-7)')
    parser.add_argument('--log-level', default=os.getenv('QRFORGE_LOG_LEVEL', 'WARNING'))
    return parser


def render(qr, args):
    options = RenderOptions.from_env()
    overrides = {
        'module_size': args.module_size,
        'margin': args.margin,
        'dark_color': args.dark,
        'light_color': args.light,
    }
    symbol = qr.symbol

    if args.output_format == 'svg':
        return qr_to_svg_optimized(symbol, options, **overrides)
    if args.output_format == 'svg-rects':
        return qr_to_svg(symbol, options, **overrides)
    if args.output_format == 'ascii':
        return qr_to_ascii(symbol)
    if args.output_format == 'matrix':
        return json.dumps({
            'matrix': qr_to_matrix(symbol),
            'version': symbol.version,
            'size': symbol.size,
            'ecLevel': symbol.ec_level,
        })

    qr_to_png(symbol, args.output, options, **overrides)
    return None


def run(args):
    if args.output_format == 'png' and not args.output:
        raise QRError('png output needs --output')

    qr = QRcode(args.text, ec_level=args.ec_level, mask=args.mask)
    result = render(qr, args)

    if result is None:
        logger.info('Wrote version %d-%s PNG to %s', qr.version, qr.ec_level, args.output)
    elif args.output:
        with open(args.output, 'w', encoding='utf-8') as handle:
            handle.write(result)
        logger.info('Wrote version %d-%s %s to %s', qr.version, qr.ec_level, args.output_format, args.output)
    else:
        sys.stdout.write(result)
        if not result.endswith('\n'):
            sys.stdout.write('\n')


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        run(args)
    except (QRError, OSError) as exc:
        print('error: %s' % exc, file=sys.stderr)
        return 2

    return 0


def _configure_logging(level_name):
    logging.basicConfig(level=getattr(logging, str(level_name).upper(), logging.WARNING))


if __name__ == '__main__':
    sys.exit(main())
