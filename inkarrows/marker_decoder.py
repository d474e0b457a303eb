'''
Copyright (C) 2021-2023 Scott Pakin, scott-ink@pakin.org

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program; if not, write to the Free Software
Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
02110-1301, USA.
'''

import inkex
from inkex.paths import Curve, Line, Move, Vert, ZoneClose
from .errors import collector, parse_float
from .marker_encoder import ATTR_ARROW_SIZE_NUM, ATTR_DOT_SIZE_NUM, \
    ATTR_INVERTED, ATTR_STYLE, ATTR_TBAR_SIZE_NUM, MARKER_END, \
    MARKER_START, arrow_attr
from .numeric import equals, is_zero
from .parameters import ArrowParameters
from .styles import ArrowStyle


def _ratio(num, denom):
    'Divide two numbers, treating division by (nearly) zero as zero.'
    if is_zero(denom):
        return 0.0
    return num/denom


def _declared_stroke(node):
    '''Return the stroke an SVG element declares, either as an attribute or
    within its style, or None if it declares no visible stroke.'''
    stroke = node.get('stroke')
    if stroke is None:
        stroke = inkex.Style(node.get('style', '')).get('stroke')
    if stroke is None or stroke.strip() == 'none':
        return None
    return stroke


class _Context():
    'Bundle the inputs shared by all of the decoding functions.'

    def __init__(self, marker, owner, role, params, errors):
        self.marker = marker
        self.lw = owner.full_thickness
        self.is_start = role == MARKER_START
        self.params = params
        self.errors = errors

    def number(self, node, name, default=1.0):
        "Parse one of our numeric attributes from a marker's child."
        return parse_float(node.get(arrow_attr(name)), default, self.errors)

    @property
    def ref_x(self):
        "Return the marker's horizontal reference offset."
        return parse_float(self.marker.get('refX'), 0.0, self.errors)


# ----------------------------------------------------------------------

# The following functions infer an arrowhead from the geometry of the
# shape within a marker.  Each sets params.style only if it recognizes
# the shape.

def _decode_circle(circle, ctx):
    'Recognize a disk, a circle, or a line-width dot.'
    params, lw = ctx.params, ctx.lw
    radius = parse_float(circle.get('r'), 0.0, ctx.errors)
    dot_num = ctx.number(circle, ATTR_DOT_SIZE_NUM)
    at_end = is_zero(ctx.ref_x)

    # An unstroked circle is a disk.
    if _declared_stroke(circle) is None:
        style = ArrowStyle.DISK_END if at_end else ArrowStyle.DISK_IN
        dot_dim = radius*lw*2 - dot_num*lw
    else:
        style = ArrowStyle.CIRCLE_END if at_end else ArrowStyle.CIRCLE_IN
        dot_dim = (radius*lw + lw/2)*2 - dot_num*lw
    params.dot_size_num = dot_num
    params.dot_size_dim = dot_dim

    # A disk with nothing beyond the line width is just a round dot.
    if is_zero(dot_dim) or is_zero(params.dot_diameter(lw)):
        style = ArrowStyle.ROUND_IN
    params.style = style


def _decode_bar_bracket(path, cmds, ctx):
    '''Recognize a bar, a round bracket, or a square bracket.  Square
    brackets survive the trip only when they are wider than the line.'''
    params, lw = ctx.params, ctx.lw
    m = cmds[0]
    seg = cmds[1]
    tbar_num = ctx.number(path, ATTR_TBAR_SIZE_NUM)
    y = abs(m.y)
    params.bar_size_num = tbar_num
    params.bar_size_dim = y*lw*2 - tbar_num*lw

    # A straight line across the line is a bar.
    if (isinstance(seg, Line) and equals(seg.x, m.x)) or \
       isinstance(seg, Vert):
        if is_zero(m.x):
            params.style = ArrowStyle.BAR_IN
        else:
            params.style = ArrowStyle.BAR_END
        return

    # A curve is a round bracket.
    if isinstance(seg, Curve):
        width = params.bar_width(lw)/lw
        if equals(abs(m.x), 0.5):
            style = ArrowStyle.RIGHT_ROUND_BRACKET
        else:
            style = ArrowStyle.LEFT_ROUND_BRACKET
        if not ctx.is_start:
            style = style.opposite()
        params.style = style
        params.round_bracket_length_ratio = \
            _ratio(abs(m.x - seg.x4) - 0.5, width)
        return

    # Three straight lines form a square bracket.  The bar was traced half
    # a line width inside the bracket's extent, so a bracket narrower than
    # the line reads back with a negative bar_size_dim.
    if len(cmds) == 4 and all([isinstance(c, Line) for c in cmds[1:]]):
        lgth = abs(m.x - seg.x)
        y += -0.5 if m.y > 0 else 0.5
        params.bar_size_dim = y*lw*2 - tbar_num*lw
        params.bracket_length_ratio = \
            _ratio((lgth - 0.5)*lw, params.bar_width(lw))
        if ctx.ref_x > 0:
            params.style = ArrowStyle.RIGHT_SQUARE_BRACKET
        else:
            params.style = ArrowStyle.LEFT_SQUARE_BRACKET


def _decode_arrow(path, cmds, ctx):
    'Recognize a single or double arrowhead.'
    params, lw = ctx.params, ctx.lw
    m = cmds[0]
    seg = cmds[1]
    if not (isinstance(seg, Line) and
            isinstance(cmds[2], Line) and
            isinstance(cmds[3], Line) and
            isinstance(cmds[4], ZoneClose)):
        return
    arr_num = ctx.number(path, ATTR_ARROW_SIZE_NUM)
    lgth = abs(seg.x - m.x)
    move_is_0 = is_zero(m.x) and is_zero(m.y)

    # Arrowheads are written pointing out of the start of the line.
    if len(cmds) == 10:
        if move_is_0:
            style = ArrowStyle.LEFT_DBLE_ARROW
        else:
            style = ArrowStyle.RIGHT_DBLE_ARROW
    else:
        style = ArrowStyle.LEFT_ARROW if move_is_0 else ArrowStyle.RIGHT_ARROW
    if not ctx.is_start:
        style = style.opposite()
    params.style = style

    arr_dim = lw*(seg.y*2 - arr_num)
    params.arrow_size_num = arr_num
    params.arrow_size_dim = arr_dim
    params.arrow_length_ratio = _ratio(lgth, (arr_num*lw + arr_dim)/lw)
    params.arrow_inset_ratio = _ratio(abs(seg.x - cmds[2].x), lgth)


def _decode_path(path, ctx):
    'Recognize an arrowhead drawn as a path by its number of commands.'
    try:
        cmds = list(inkex.Path(path.get('d', '')).to_absolute())
    except (TypeError, ValueError) as err:
        ctx.errors.add(err)
        return
    if len(cmds) < 2 or not isinstance(cmds[0], Move):
        return
    if len(cmds) in (2, 4):
        _decode_bar_bracket(path, cmds, ctx)
    elif len(cmds) in (5, 10):
        _decode_arrow(path, cmds, ctx)


def _apply_style_tag(ctx):
    '''Let an explicit style written on the marker override the inferred
    one.'''
    tag = ctx.marker.get(arrow_attr(ATTR_STYLE))
    if tag is None:
        return
    try:
        style = ArrowStyle.parse(tag)
    except ValueError as err:
        ctx.errors.add(err)
        return
    params = ctx.params
    params.style = style
    params.inverted = ctx.marker.get(arrow_attr(ATTR_INVERTED)) == 'true'
    if style.is_circle_or_disk and is_zero(params.dot_diameter(ctx.lw)):
        params.style = ArrowStyle.ROUND_IN


def decode(marker, owner, role=MARKER_END, params=None, errors=None):
    '''Reconstruct the parameters of an arrowhead from an SVG marker used
    at the given end (role) of a shape.  Markup that cannot be recognized
    yields a style of NONE rather than an error.  Errors parsing numbers
    are recorded in errors (by default, the module-level collector).'''
    if role not in (MARKER_START, MARKER_END):
        raise ValueError('unknown marker role %s' % repr(role))
    if params is None:
        params = ArrowParameters()
    if errors is None:
        errors = collector
    params.style = ArrowStyle.NONE
    params.inverted = False
    params.is_left_arrow = role == MARKER_START
    ctx = _Context(marker, owner, role, params, errors)

    # Paths take precedence over circles.
    paths = [c for c in marker if c.tag == inkex.addNS('path', 'svg')]
    circles = [c for c in marker if c.tag == inkex.addNS('circle', 'svg')]
    if paths:
        _decode_path(paths[0], ctx)
    elif circles:
        _decode_circle(circles[0], ctx)
    _apply_style_tag(ctx)
    return params
