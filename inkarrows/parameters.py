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
import inkex
from .numeric import EPSILON, equals
from .styles import ArrowStyle

# Name the numeric fields of an ArrowParameters.  *_num fields multiply
# the line thickness; *_dim fields are absolute sizes in user units.
NUMERIC_FIELDS = ('bar_size_num', 'bar_size_dim',
                  'dot_size_num', 'dot_size_dim',
                  'arrow_size_num', 'arrow_size_dim',
                  'arrow_length_ratio', 'arrow_inset_ratio',
                  'bracket_length_ratio', 'round_bracket_length_ratio')

BOOLEAN_FIELDS = ('inverted', 'is_left_arrow')


def _pstricks_defaults():
    'Return the PSTricks default arrow parameters in user units.'
    two_pt = inkex.units.convert_unit('2pt', 'px')
    half_pt = inkex.units.convert_unit('0.5pt', 'px')
    return {'bar_size_num': 5.0,
            'bar_size_dim': two_pt,
            'dot_size_num': 2.5,
            'dot_size_dim': half_pt,
            'arrow_size_num': 3.0,
            'arrow_size_dim': two_pt,
            'arrow_length_ratio': 1.4,
            'arrow_inset_ratio': 0.4,
            'bracket_length_ratio': 0.15,
            'round_bracket_length_ratio': 0.15}


# Store a stack of default arrow parameters in _default_arrow.
_default_arrow = [_pstricks_defaults()]


def arrow_defaults(**fields):
    '''Modify the default arrow parameters and return the complete set of
    current defaults.'''
    global _default_arrow
    for k, v in fields.items():
        if k not in NUMERIC_FIELDS:
            raise ValueError('unknown arrow parameter %s' % repr(k))
        _default_arrow[-1][k] = _check_number(k, v)
    return dict(_default_arrow[-1])


def push_defaults():
    'Duplicate the top element of the default arrow parameter stack.'
    global _default_arrow
    _default_arrow.append(dict(_default_arrow[-1].items()))


def pop_defaults():
    'Discard the top element of the default arrow parameter stack.'
    global _default_arrow
    _default_arrow.pop()
    if len(_default_arrow) == 0:
        _default_arrow.append(_pstricks_defaults())
        raise IndexError('more defaults popped than pushed')


def _check_number(name, val):
    'Return val as a float or raise ValueError if it is not finite.'
    if isinstance(val, bool):
        raise ValueError('%s must be a number, not a boolean' % name)
    try:
        val = float(val)
    except (TypeError, ValueError):
        raise ValueError('%s must be a number, not %s' %
                         (name, repr(val))) from None
    if not math.isfinite(val):
        raise ValueError('%s must be finite' % name)
    return val


class ArrowParameters():
    '''Describe one arrowhead: its style plus the dimensionless numbers
    that size it relative to the owning shape's line thickness.  Fields
    that do not apply to the current style are ignored, so changing the
    style never requires clearing anything.'''

    # Name the fields that each family of styles reads.
    _family_fields = {
        'bar': ('bar_size_num', 'bar_size_dim'),
        'square_bracket': ('bar_size_num', 'bar_size_dim',
                           'bracket_length_ratio'),
        'round_bracket': ('bar_size_num', 'bar_size_dim',
                          'round_bracket_length_ratio'),
        'dot': ('dot_size_num', 'dot_size_dim'),
        'arrow': ('arrow_size_num', 'arrow_size_dim',
                  'arrow_length_ratio', 'arrow_inset_ratio'),
        'minimal': (),
        'none': ()
    }

    def __init__(self, style=ArrowStyle.NONE, inverted=False,
                 is_left_arrow=False, **fields):
        self.style = style
        self.inverted = inverted
        self.is_left_arrow = is_left_arrow
        for k in NUMERIC_FIELDS:
            setattr(self, k, 0.0)
        for k, v in fields.items():
            if k not in NUMERIC_FIELDS:
                raise ValueError('unknown arrow parameter %s' % repr(k))
            setattr(self, k, v)

    def __setattr__(self, name, val):
        'Validate values as they are assigned.'
        if name == 'style':
            val = ArrowStyle.parse(val)
        elif name in BOOLEAN_FIELDS:
            val = bool(val)
        elif name in NUMERIC_FIELDS:
            val = _check_number(name, val)
        super().__setattr__(name, val)

    def __repr__(self):
        fields = ['%s=%.10g' % (k, getattr(self, k))
                  for k in self.relevant_fields()]
        if self.inverted:
            fields.append('inverted')
        if self.is_left_arrow:
            fields.append('left')
        return '<%s %s %s>' % (self.__class__.__name__,
                               self.style.name, ' '.join(fields))

    @classmethod
    def with_defaults(cls, style=ArrowStyle.NONE, inverted=False,
                      is_left_arrow=False, **fields):
        '''Create arrow parameters from the current defaults, overridden
        by any fields given explicitly.'''
        all_fields = dict(_default_arrow[-1].items())
        all_fields.update(fields)
        return cls(style, inverted, is_left_arrow, **all_fields)

    @staticmethod
    def family(style):
        'Return the name of the family a style belongs to.'
        style = ArrowStyle.parse(style)
        if style.is_bar:
            return 'bar'
        if style.is_square_bracket:
            return 'square_bracket'
        if style.is_round_bracket:
            return 'round_bracket'
        if style.is_circle_or_disk:
            return 'dot'
        if style.is_arrow:
            return 'arrow'
        if style.is_minimal:
            return 'minimal'
        return 'none'

    def relevant_fields(self, style=None):
        '''Return the names of the numeric fields the given style (by
        default, our own) reads.'''
        if style is None:
            style = self.style
        return self._family_fields[self.family(style)]

    def copy(self):
        'Return an independent copy of the parameters.'
        other = ArrowParameters()
        other.copy_from(self)
        return other

    def copy_from(self, other, keep_style=False):
        '''Overwrite our fields with those of another set of parameters,
        optionally preserving our own style.'''
        if not keep_style:
            self.style = other.style
        self.inverted = other.inverted
        self.is_left_arrow = other.is_left_arrow
        for k in NUMERIC_FIELDS:
            setattr(self, k, getattr(other, k))
        return self

    def is_close(self, other, epsilon=EPSILON):
        '''Return True if two sets of parameters describe the same
        arrowhead.  Only the fields the style reads are compared.'''
        if self.style != other.style:
            return False
        if self.inverted != other.inverted or \
           self.is_left_arrow != other.is_left_arrow:
            return False
        return all([equals(getattr(self, k), getattr(other, k), epsilon)
                    for k in self.relevant_fields()])

    def has_style(self, owner):
        '''Return True if the arrowhead is visible on the given owner: it
        must have a style and the owner's stroke must be drawn.'''
        return self.style != ArrowStyle.NONE and owner.stroke_visible

    # The following methods convert the dimensionless parameters to
    # absolute sizes for a given line thickness.

    def bar_width(self, thickness):
        'Return the length of a bar or bracket across the line.'
        return self.bar_size_dim + self.bar_size_num*thickness

    def dot_diameter(self, thickness):
        'Return the outer diameter of a disk or circle.'
        return self.dot_size_dim + self.dot_size_num*thickness

    def dot_radius(self, thickness):
        'Return the outer radius of a disk or circle.'
        return self.dot_diameter(thickness)/2

    def arrow_width(self, thickness):
        'Return the width of an arrowhead across the line.'
        return self.arrow_size_num*thickness + self.arrow_size_dim

    def arrow_length(self, thickness):
        'Return the length of an arrowhead along the line.'
        return self.arrow_length_ratio*self.arrow_width(thickness)

    def arrow_inset(self, thickness):
        'Return the depth of the notch at the back of an arrowhead.'
        return self.arrow_inset_ratio*self.arrow_length(thickness)

    def bracket_length(self, thickness):
        'Return how far the arms of a square bracket extend.'
        return self.bracket_length_ratio*self.bar_width(thickness)

    def round_bracket_length(self, thickness):
        'Return the depth of a round bracket along the line.'
        return self.round_bracket_length_ratio*self.bar_width(thickness)
