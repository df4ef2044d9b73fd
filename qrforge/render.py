'''
Output formats for a finished symbol. Every renderer takes anything with
`size` and `modules` attributes (a QRSymbol or a QRcode).
'''

from PIL import Image, ImageDraw

from .config import resolve_options

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'


def qr_to_matrix(qr):
    return [[1 if module else 0 for module in row] for row in qr.modules]


def qr_to_ascii(qr):
    '''
    Two characters per module, one newline-terminated line per row
    '''

    return ''.join(''.join('██' if module else '  ' for module in row) + '\n'
                   for row in qr.modules)


def _svg_open(total, light_color):
    return ('<svg xmlns="%s" viewBox="0 0 %d %d" width="%d" height="%d">'
            '<rect width="%d" height="%d" fill="%s"/>'
            % (SVG_NAMESPACE, total, total, total, total, total, total, light_color))


def qr_to_svg(qr, options=None, **overrides):
    '''
    One <rect> per dark module on top of a background <rect>
    '''

    options = resolve_options(options, **overrides)
    step = options.module_size
    total = (qr.size + 2 * options.margin) * step

    parts = [_svg_open(total, options.light_color)]
    for row_index, row in enumerate(qr.modules):
        for col_index, module in enumerate(row):
            if module:
                parts.append('<rect x="%d" y="%d" width="%d" height="%d" fill="%s"/>' % (
                    (col_index + options.margin) * step, (row_index + options.margin) * step,
                    step, step, options.dark_color))
    parts.append('</svg>')

    return ''.join(parts)


def _dark_runs(row):
    '''
    (start, length) of every horizontal run of dark modules in a row
    '''

    start = None
    for index, module in enumerate(row):
        if module and start is None:
            start = index
        elif not module and start is not None:
            yield start, index - start
            start = None

    if start is not None:
        yield start, len(row) - start


def qr_to_svg_optimized(qr, options=None, **overrides):
    '''
    Same picture as qr_to_svg, but all dark modules go into a single <path>
    with one rectangle per horizontal run
    '''

    options = resolve_options(options, **overrides)
    step = options.module_size
    total = (qr.size + 2 * options.margin) * step

    commands = []
    for row_index, row in enumerate(qr.modules):
        y = (row_index + options.margin) * step
        for start, length in _dark_runs(row):
            x = (start + options.margin) * step
            width = length * step
            commands.append('M%d,%dh%dv%dh-%dz' % (x, y, width, step, width))

    return '%s<path d="%s" fill="%s"/></svg>' % (
        _svg_open(total, options.light_color), ''.join(commands), options.dark_color)


def qr_to_image(qr, options=None, **overrides):
    options = resolve_options(options, **overrides)
    step = options.module_size
    total = (qr.size + 2 * options.margin) * step

    image = Image.new(mode='RGB', size=(total, total), color=options.light_color)
    draw = ImageDraw.Draw(image)

    for y in range(qr.size):
        for x in range(qr.size):
            if qr.modules[y][x]:
                left = (x + options.margin) * step
                top = (y + options.margin) * step
                # Pillow rectangles include their far corner
                draw.rectangle((left, top, left + step - 1, top + step - 1), fill=options.dark_color)

    return image


def qr_to_png(qr, fp, options=None, **overrides):
    '''
    Writes a PNG to a path or binary file object
    '''

    qr_to_image(qr, options, **overrides).save(fp, format='PNG')
