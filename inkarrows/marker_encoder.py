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
from .numeric import format_number
from .styles import ArrowStyle

# Namespace the attributes that are not part of SVG so that they cannot
# collide with standard ones.
ARROW_NS = 'urn:inkarrows:arrowheads'
ATTR_STYLE = 'arrow-style'
ATTR_INVERTED = 'arrow-inverted'
ATTR_ARROW_SIZE_NUM = 'arrow-size-num'
ATTR_TBAR_SIZE_NUM = 'arrow-tbar-size-num'
ATTR_DOT_SIZE_NUM = 'arrow-dot-size-num'

# Name the attributes by which a shape refers to its markers.
MARKER_START = 'marker-start'
MARKER_END = 'marker-end'


def arrow_attr(name):
    'Return the fully qualified name of one of our marker attributes.'
    return inkex.addNS(name, ARROW_NS)


def marker_role(params):
    "Return the attribute through which a shape refers to an arrow's marker."
    return MARKER_START if params.is_left_arrow else MARKER_END


def _path(elts):
    'Return a PathElement from a list of SVG path letters and numbers.'
    d = ' '.join([e if isinstance(e, str) else format_number(e)
                  for e in elts])
    return inkex.PathElement(d=d)


def _circle(radius):
    'Return a circle of a given radius centered on the origin.'
    return inkex.Circle(cx='0', cy='0', r=format_number(radius))


# ----------------------------------------------------------------------

# The following functions each append one family of arrowhead to a
# marker.  All coordinates are divided by the line width because markers
# are scaled by the stroke width of the shape that references them.

def _encode_disk(params, lw, color, marker):
    '''Append a disk and return the marker's reference offset in user
    units.'''
    circle = _circle(params.dot_radius(lw)/lw)
    circle.set(arrow_attr(ATTR_DOT_SIZE_NUM),
               format_number(params.dot_size_num))
    circle.set('fill', str(color))
    marker.append(circle)
    if params.style == ArrowStyle.DISK_IN:
        return lw*(-1 if params.is_left_arrow else 1)
    return 0.0


def _encode_circle(params, owner, lw, color, marker):
    '''Append a stroked circle and return the marker's reference offset in
    user units.'''
    circle = _circle((params.dot_radius(lw) - lw/2)/lw)
    circle.set(arrow_attr(ATTR_DOT_SIZE_NUM),
               format_number(params.dot_size_num))
    circle.set('fill', str(owner.interior_color))
    circle.set('stroke', str(color))
    circle.set('stroke-width', '1')
    marker.append(circle)
    if params.style == ArrowStyle.CIRCLE_IN:
        return lw*(-1 if params.is_left_arrow else 1)
    return 0.0


def _encode_bar(params, lw, color, marker):
    'Append a bar.'
    half = params.bar_width(lw)/(lw*2)
    x = 0.0
    if params.style == ArrowStyle.BAR_IN:
        x = 0.5 if params.is_left_arrow else -0.5
    bar = _path(['M', x, -half, 'L', x, half])
    bar.set(arrow_attr(ATTR_TBAR_SIZE_NUM),
            format_number(params.bar_size_num))
    bar.set('stroke', str(color))
    bar.set('fill', 'none')
    bar.set('stroke-width', '1')
    marker.append(bar)


def _encode_square_bracket(params, lw, color, marker):
    'Append a square bracket traced as an open four-point path.'
    half = params.bar_width(lw)/(lw*2)
    lgth = params.bracket_length(lw)/lw
    if params.style == ArrowStyle.LEFT_SQUARE_BRACKET:
        lgth2 = -lgth if params.inverted else 0.0
        tip = lgth + lgth2 + 0.5
    else:
        lgth2 = lgth if params.inverted else 0.0
        tip = -lgth + lgth2 - 0.5
    bracket = _path(['M', tip, -half + 0.5,
                     'L', lgth2, -half + 0.5,
                     'L', lgth2, half - 0.5,
                     'L', tip, half - 0.5])
    bracket.set(arrow_attr(ATTR_TBAR_SIZE_NUM),
                format_number(params.bar_size_num))
    bracket.set('stroke', str(color))
    bracket.set('fill', 'none')
    bracket.set('stroke-width', '1')
    marker.append(bracket)


def _encode_arrow(params, lw, color, marker):
    'Append a single or double arrowhead as closed paths.'
    width = params.arrow_width(lw)/lw
    length = params.arrow_length_ratio*width
    inset = params.arrow_inset_ratio*length
    if params.style in (ArrowStyle.LEFT_ARROW, ArrowStyle.LEFT_DBLE_ARROW):
        length, inset = -length, -inset
    count = 2 if params.style.is_double_arrow else 1
    lgth2 = count*length if params.inverted else 0.0
    elts = []
    for i in range(count):
        x = lgth2 - i*length
        elts.extend(['M', x, 0.0,
                     'L', x - length, width/2,
                     'L', x - length + inset, 0.0,
                     'L', x - length, -width/2,
                     'Z'])
    arrow = _path(elts)
    arrow.set(arrow_attr(ATTR_ARROW_SIZE_NUM),
              format_number(params.arrow_size_num))
    arrow.set('fill', str(color))
    marker.append(arrow)


def _encode_round_bracket(params, lw, color, marker):
    'Append a round bracket approximated by a single cubic curve.'
    width = params.bar_width(lw)/lw
    lgth = params.round_bracket_length_ratio*width
    gap = 0.5
    if params.style == ArrowStyle.LEFT_ROUND_BRACKET:
        lgth, gap = -lgth, -gap
    lgth2 = lgth if params.inverted else 0.0
    x = -lgth + lgth2 - gap
    bracket = _path(['M', x, width/2,
                     'C', x, -width/2, lgth2, width/2, lgth2, -width/2])
    bracket.set('stroke', str(color))
    bracket.set('fill', 'none')
    bracket.set(arrow_attr(ATTR_TBAR_SIZE_NUM),
                format_number(params.bar_size_num))
    bracket.set('stroke-width', '1')
    marker.append(bracket)


def _encode_round_in(color, marker):
    'Append a dot the size of the line width.'
    circle = _circle(0.5)
    circle.set('fill', str(color))
    marker.append(circle)


def encode(params, owner, shadow=False):
    '''Return an inkex.Marker that draws an arrowhead at the end of a line
    of the owner's thickness, or None if the arrowhead is not drawn.  If
    shadow is True, the marker uses the owner's shadow color in place of
    its line color.'''
    if not params.has_style(owner):
        return None
    style = params.style
    lw = owner.full_thickness
    color = owner.shadow_color if shadow else owner.line_color

    # Prepare the marker itself.
    marker = inkex.Marker()
    marker.set('overflow', 'visible')
    marker.set('orient', 'auto')
    marker.set(arrow_attr(ATTR_STYLE), style.value)
    marker.set(arrow_attr(ATTR_INVERTED), str(params.inverted).lower())

    # Append the shape that draws the arrowhead.  SQUARE_END and ROUND_END
    # are drawn by the line cap alone so they need no shape.
    if style.is_disk:
        ref_x = _encode_disk(params, lw, color, marker)
        marker.set('refX', format_number(ref_x/lw))
    elif style.is_circle:
        ref_x = _encode_circle(params, owner, lw, color, marker)
        marker.set('refX', format_number(ref_x/lw))
    elif style.is_bar:
        _encode_bar(params, lw, color, marker)
    elif style.is_square_bracket:
        _encode_square_bracket(params, lw, color, marker)
    elif style.is_arrow:
        _encode_arrow(params, lw, color, marker)
    elif style.is_round_bracket:
        _encode_round_bracket(params, lw, color, marker)
    elif style == ArrowStyle.ROUND_IN:
        _encode_round_in(color, marker)
    return marker
