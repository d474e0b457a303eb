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
from .errors import collector


def _to_color(value, default, errors):
    'Convert a CSS color string to an inkex.Color, falling back to default.'
    if value is None or str(value).strip() in ('', 'none'):
        return default
    try:
        return inkex.Color(str(value))
    except (inkex.colors.ColorError, ValueError) as err:
        errors.add(err)
        return default


class LineOwner():
    '''Snapshot the properties of a line-like shape that its arrowheads
    depend on.  Arrowhead codecs read these values for the duration of a
    single call and never hold on to them.'''

    def __init__(self, thickness=1.0, line_color='black', fill_color='white',
                 shadow_color='gray', fillable=False, stroke_visible=True,
                 double_border=False, double_sep=0.0):
        if thickness <= 0:
            raise ValueError('line thickness must be positive')
        self.thickness = float(thickness)
        self.line_color = inkex.Color(line_color)
        self.fill_color = inkex.Color(fill_color)
        self.shadow_color = inkex.Color(shadow_color)
        self.fillable = bool(fillable)
        self.stroke_visible = bool(stroke_visible)
        self.double_border = bool(double_border)
        self.double_sep = float(double_sep)

    def __repr__(self):
        return '<%s thickness=%.10g line=%s fill=%s>' % \
            (self.__class__.__name__, self.thickness,
             self.line_color, self.fill_color)

    @property
    def full_thickness(self):
        '''Return the thickness of the whole stroke, which for a double
        border spans both lines and the gap between them.'''
        if self.double_border:
            return self.double_sep + 2*self.thickness
        return self.thickness

    @property
    def interior_color(self):
        '''Return the color used to fill hollow arrowheads: the shape's
        filling if it has one, otherwise white.'''
        if self.fillable:
            return self.fill_color
        return inkex.Color('white')

    @classmethod
    def from_element(cls, node, errors=None):
        '''Take a snapshot of an SVG element's stroke and fill as a
        LineOwner.'''
        if errors is None:
            errors = collector
        try:
            style = inkex.Style.specified_style(node)
        except AttributeError:
            style = node.style
        stroke = style.get('stroke')
        fill = style.get('fill')

        # Convert the stroke width to user units.  SVG's default is 1.
        thickness = 1.0
        width = style.get('stroke-width')
        if width is not None:
            try:
                thickness = inkex.units.convert_unit(str(width), 'px')
            except (TypeError, ValueError) as err:
                errors.add(err)
        if thickness is None or thickness <= 0:
            thickness = 1.0

        # Colors fall back to SVG's defaults.
        line_color = _to_color(stroke, inkex.Color('black'), errors)
        fill_color = _to_color(fill, inkex.Color('white'), errors)
        return cls(thickness=thickness,
                   line_color=line_color,
                   fill_color=fill_color,
                   fillable=fill is not None and fill != 'none',
                   stroke_visible=stroke is not None and stroke != 'none')
