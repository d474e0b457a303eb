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

from enum import Enum
import re


class ArrowStyle(Enum):
    '''Enumerate the arrowhead styles.  Each value is the PSTricks token
    for the style, which is also what gets written to SVG markers.'''
    NONE = ''
    BAR_END = '|'
    BAR_IN = '|*'
    DISK_END = '*'
    DISK_IN = '**'
    CIRCLE_END = 'o'
    CIRCLE_IN = 'oo'
    LEFT_ARROW = '<'
    RIGHT_ARROW = '>'
    LEFT_DBLE_ARROW = '<<'
    RIGHT_DBLE_ARROW = '>>'
    LEFT_SQUARE_BRACKET = '['
    RIGHT_SQUARE_BRACKET = ']'
    LEFT_ROUND_BRACKET = '('
    RIGHT_ROUND_BRACKET = ')'
    SQUARE_END = 'C'
    ROUND_END = 'c'
    ROUND_IN = 'cc'

    def __str__(self):
        return self.value

    @property
    def is_bar(self):
        return self in (ArrowStyle.BAR_END, ArrowStyle.BAR_IN)

    @property
    def is_disk(self):
        return self in (ArrowStyle.DISK_END, ArrowStyle.DISK_IN)

    @property
    def is_circle(self):
        return self in (ArrowStyle.CIRCLE_END, ArrowStyle.CIRCLE_IN)

    @property
    def is_circle_or_disk(self):
        return self.is_disk or self.is_circle

    @property
    def is_arrow(self):
        'True for single and double arrows.'
        return self in (ArrowStyle.LEFT_ARROW, ArrowStyle.RIGHT_ARROW) or \
            self.is_double_arrow

    @property
    def is_double_arrow(self):
        return self in (ArrowStyle.LEFT_DBLE_ARROW,
                        ArrowStyle.RIGHT_DBLE_ARROW)

    @property
    def is_square_bracket(self):
        return self in (ArrowStyle.LEFT_SQUARE_BRACKET,
                        ArrowStyle.RIGHT_SQUARE_BRACKET)

    @property
    def is_round_bracket(self):
        return self in (ArrowStyle.LEFT_ROUND_BRACKET,
                        ArrowStyle.RIGHT_ROUND_BRACKET)

    @property
    def is_minimal(self):
        'True for the line-cap styles that take no numeric parameters.'
        return self in (ArrowStyle.SQUARE_END, ArrowStyle.ROUND_END,
                        ArrowStyle.ROUND_IN)

    @property
    def uses_shape_filling(self):
        "True if the arrowhead's interior takes the owning shape's filling."
        return self.is_circle

    @property
    def needs_line_reduction(self):
        '''True if the line should stop short of its end point so that it
        does not poke through the tip of the arrowhead.'''
        return self.is_arrow

    def opposite(self):
        '''Return the mirror image of the style: left and right swap, and
        symmetric styles map to themselves.'''
        return _opposites.get(self, self)

    @classmethod
    def parse(cls, text):
        '''Convert a PSTricks token (e.g., "<<") or a variant name (e.g.,
        "LEFT_DBLE_ARROW" or "LeftDoubleArrow") to an ArrowStyle.'''
        if isinstance(text, ArrowStyle):
            return text
        if text is None:
            return cls.NONE
        text = str(text).strip()
        try:
            return cls(text)
        except ValueError:
            pass
        name = text.upper()
        if name not in cls.__members__:
            # Convert CamelCase to UPPER_CASE.
            name = re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', text).upper()
            name = name.replace('DOUBLE', 'DBLE')
        try:
            return cls.__members__[name]
        except KeyError:
            raise ValueError('unknown arrow style %s' % repr(text)) from None


_opposites = {
    ArrowStyle.LEFT_ARROW: ArrowStyle.RIGHT_ARROW,
    ArrowStyle.RIGHT_ARROW: ArrowStyle.LEFT_ARROW,
    ArrowStyle.LEFT_DBLE_ARROW: ArrowStyle.RIGHT_DBLE_ARROW,
    ArrowStyle.RIGHT_DBLE_ARROW: ArrowStyle.LEFT_DBLE_ARROW,
    ArrowStyle.LEFT_SQUARE_BRACKET: ArrowStyle.RIGHT_SQUARE_BRACKET,
    ArrowStyle.RIGHT_SQUARE_BRACKET: ArrowStyle.LEFT_SQUARE_BRACKET,
    ArrowStyle.LEFT_ROUND_BRACKET: ArrowStyle.RIGHT_ROUND_BRACKET,
    ArrowStyle.RIGHT_ROUND_BRACKET: ArrowStyle.LEFT_ROUND_BRACKET,
}
