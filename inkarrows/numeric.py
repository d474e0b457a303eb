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

# Serializing, parsing, and rotating introduce small errors, so all
# geometric comparisons are made to within EPSILON.
EPSILON = 1e-5


def equals(a, b, epsilon=EPSILON):
    'Return True if two floating-point numbers are equal to within epsilon.'
    return abs(a - b) <= epsilon


def is_zero(a, epsilon=EPSILON):
    'Return True if a floating-point number is zero to within epsilon.'
    return equals(a, 0.0, epsilon)


def angle_is_zero(angle, epsilon=EPSILON):
    'Return True if an angle in radians is a multiple of a full turn.'
    turns = math.fmod(angle, 2*math.pi)
    return is_zero(turns, epsilon) or equals(abs(turns), 2*math.pi, epsilon)


def format_number(val):
    'Format a number for use in an SVG attribute.'
    # Integers are written as is.  Floats keep a fair number of
    # significant digits.
    if isinstance(val, int) and not isinstance(val, bool):
        return str(val)
    return '%.10g' % val
