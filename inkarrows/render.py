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

import math
import lxml
import inkex
from .numeric import angle_is_zero, format_number
from .styles import ArrowStyle


def should_invert(params, segment):
    '''Return True if an arrowhead's geometry, which is built to extend
    from the tip toward negative x, must be mirrored to extend toward
    positive x.'''
    return params.inverted != segment.is_positive_direction()


def _path_d(elts):
    'Convert a list of SVG path letters and numbers to a path string.'
    return ' '.join([e if isinstance(e, str) else format_number(e)
                     for e in elts])


def _style(**style):
    'Convert keyword arguments to an inkex.Style, mapping _ to -.'
    return inkex.Style({k.replace('_', '-'): str(v)
                        for k, v in style.items()})


def _stroked_path(elts, color, width, linecap='butt'):
    'Return an unfilled, stroked PathElement.'
    obj = inkex.PathElement(d=_path_d(elts))
    obj.style = _style(fill='none', stroke=color,
                       stroke_width=format_number(width),
                       stroke_linecap=linecap)
    return obj


def _filled_path(elts, color):
    'Return a filled, unstroked PathElement.'
    obj = inkex.PathElement(d=_path_d(elts))
    obj.style = _style(fill=color, stroke='none')
    return obj


class RenderedArrow():
    '''Hold the shapes that draw one arrowhead plus the rotation that
    aligns them with the line.  The shapes are expressed in the line's
    coordinate system before rotation.'''

    def __init__(self, elements=None, transform=None):
        self.elements = elements or []
        if transform is None:
            transform = inkex.Transform()
        self.transform = transform
        for obj in self.elements:
            if transform != inkex.Transform():
                obj.transform = transform

    def __repr__(self):
        return '<%s [%s] %s>' % \
            (self.__class__.__name__,
             ', '.join([obj.TAG for obj in self.elements]),
             self.transform)

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def _element_bbox(self, obj):
        'Return the bounding box of one element after rotation.'
        if isinstance(obj, inkex.Circle):
            r = float(obj.get('r'))
            ctr = self.transform.apply_to_point((float(obj.get('cx')),
                                                 float(obj.get('cy'))))
            return inkex.BoundingBox((ctr.x - r, ctr.x + r),
                                     (ctr.y - r, ctr.y + r))
        return obj.path.transform(self.transform).bounding_box()

    def bounding_box(self):
        '''Return the bounding box of the arrowhead's geometry (ignoring
        stroke width) or None if nothing was rendered.'''
        bbox = None
        for obj in self.elements:
            ebox = self._element_bbox(obj)
            if ebox is None:
                continue
            if bbox is None:
                bbox = ebox
            else:
                bbox += ebox
        return bbox

    def group(self):
        'Return a new inkex.Group containing copies of all elements.'
        grp = inkex.Group()
        for obj in self.elements:
            grp.append(obj.copy())
        return grp

    def svg(self, pretty_print=False):
        'Return the arrowhead as an SVG string.'
        return lxml.etree.tostring(self.group(),
                                   encoding='unicode',
                                   pretty_print=pretty_print)


# ----------------------------------------------------------------------

# The following functions draw each family of arrowhead at pt1 of a
# segment.  Each returns a list of inkex shape elements.

def _bar_in_x(segment, owner):
    'Return the x coordinate of a bar set in by half the line thickness.'
    dec = owner.thickness/2
    if not segment.is_positive_direction():
        dec = -dec
    return segment.pt1.x + dec


def _render_bar(params, segment, owner):
    'Draw a bar across the end of the line.'
    width = params.bar_width(owner.full_thickness)
    y = segment.pt1.y
    if params.style == ArrowStyle.BAR_IN:
        x = _bar_in_x(segment, owner)
    else:
        x = segment.pt1.x
    return [_stroked_path(['M', x, y - width/2, 'L', x, y + width/2],
                          owner.line_color, owner.thickness)]


def _render_square_bracket(params, segment, owner):
    'Draw a bar with two arms: a square bracket.'
    lw = owner.full_thickness
    width = params.bar_width(lw)
    lgth = params.bracket_length(lw) + lw/2
    if not should_invert(params, segment):
        lgth = -lgth
    x = _bar_in_x(segment, owner)
    y0 = segment.pt1.y - width/2
    y1 = segment.pt1.y + width/2
    return [_stroked_path(['M', x, y0, 'L', x, y1,
                           'M', x, y0 + lw/2, 'L', x + lgth, y0 + lw/2,
                           'M', x, y1 - lw/2, 'L', x + lgth, y1 - lw/2],
                          owner.line_color, owner.thickness)]


def _render_round_bracket(params, segment, owner):
    'Draw a 100-degree elliptical arc: a round bracket.'
    width = params.bar_width(owner.full_thickness)
    lgth = params.round_bracket_length(owner.full_thickness)
    width_arc = lgth*2
    if params.inverted:
        width_arc += owner.thickness/2
    rx, ry = width_arc/2, width/2
    x, y = segment.pt1.x, segment.pt1.y

    # Angles run counterclockwise as seen on the screen.
    if should_invert(params, segment):
        cx, start = x + rx, math.radians(130)
    else:
        cx, start = x - rx, math.radians(-50)
    end = start + math.radians(100)
    x0, y0 = cx + rx*math.cos(start), y - ry*math.sin(start)
    x1, y1 = cx + rx*math.cos(end), y - ry*math.sin(end)
    return [_stroked_path(['M', x0, y0,
                           'A', rx, ry, 0, 0, 0, x1, y1],
                          owner.line_color, owner.thickness)]


def _render_dot(params, segment, owner):
    'Draw a disk or a circle, either centered on pt1 or set in.'
    lw = owner.full_thickness
    radius = params.dot_radius(lw)
    x, y = segment.pt1.x, segment.pt1.y
    if params.style in (ArrowStyle.DISK_IN, ArrowStyle.CIRCLE_IN):
        if segment.is_positive_direction():
            x += radius
        else:
            x -= radius
    if params.style.is_disk:
        obj = inkex.Circle(cx=format_number(x), cy=format_number(y),
                           r=format_number(radius))
        obj.style = _style(fill=owner.line_color, stroke='none')
    else:
        # Keep the stroke within the nominal diameter.
        obj = inkex.Circle(cx=format_number(x), cy=format_number(y),
                           r=format_number(radius - lw/2))
        obj.style = _style(fill=owner.interior_color,
                           stroke=owner.line_color,
                           stroke_width=format_number(lw))
    return [obj]


def _kite(x, y, length, inset, width):
    'Return the path commands for one arrowhead with its tip at (x, y).'
    return ['M', x, y,
            'L', x + length, y - width/2,
            'L', x + length - inset, y,
            'L', x + length, y + width/2,
            'Z']


def _render_arrow(params, segment, owner):
    'Draw a single or double arrowhead.'
    lw = owner.full_thickness
    width = params.arrow_width(lw)
    length = params.arrow_length(lw)
    inset = params.arrow_inset(lw)
    x, y = segment.pt1.x, segment.pt1.y
    count = 2 if params.style.is_double_arrow else 1

    # An inverted arrowhead has its back, not its tip, at pt1.
    if params.inverted:
        if segment.is_positive_direction():
            x += count*length
        else:
            x -= count*length
    if not should_invert(params, segment):
        length, inset = -length, -inset
    elts = []
    for i in range(count):
        elts.extend(_kite(x + i*length, y, length, inset, width))
    return [_filled_path(elts, owner.line_color)]


def _render_minimal(params, segment, owner):
    '''Draw a stub of a line whose only purpose is to show a square or
    round line cap.'''
    x, y = segment.pt1.x, segment.pt1.y
    if params.style == ArrowStyle.ROUND_IN:
        lw = owner.full_thickness
        if segment.is_positive_direction():
            x += lw/2
        else:
            x -= lw/2
        return [_stroked_path(['M', x, y, 'L', x, y],
                              owner.line_color, lw, 'round')]
    x2 = x + 1 if x < segment.pt2.x else x - 1
    cap = 'square' if params.style == ArrowStyle.SQUARE_END else 'round'
    return [_stroked_path(['M', x, y, 'L', x2, y],
                          owner.line_color, owner.thickness, cap)]


def render(params, segment, owner):
    '''Return a RenderedArrow that draws an arrowhead at pt1 of a segment.
    Nothing is rendered for a style of NONE, for a missing segment, or
    when the owner's stroke is not drawn.'''
    if segment is None or not params.has_style(owner):
        return RenderedArrow()
    style = params.style
    if style.is_bar:
        elements = _render_bar(params, segment, owner)
    elif style.is_square_bracket:
        elements = _render_square_bracket(params, segment, owner)
    elif style.is_round_bracket:
        elements = _render_round_bracket(params, segment, owner)
    elif style.is_circle_or_disk:
        elements = _render_dot(params, segment, owner)
    elif style.is_arrow:
        elements = _render_arrow(params, segment, owner)
    elif style.is_minimal:
        elements = _render_minimal(params, segment, owner)
    else:
        elements = []

    # Rotate everything about pt1 to follow the line.
    transform = inkex.Transform()
    angle = segment.angle
    if not angle_is_zero(angle):
        transform.add_rotate(math.degrees(angle),
                             segment.pt1.x, segment.pt1.y)
    return RenderedArrow(elements, transform)
