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
from .numeric import equals


def is_positive_direction(pt1, pt2):
    '''Return True if the segment from pt1 to pt2 runs left to right or,
    for vertical segments, top to bottom.  This one rule decides which
    way every arrowhead points.'''
    return pt1[0] < pt2[0] or (equals(pt1[0], pt2[0]) and pt1[1] < pt2[1])


class Segment():
    '''Represent the oriented line segment at one end of a shape.  pt1 is
    the point that carries the arrowhead; pt2 is the neighbouring point
    on the same line.'''

    def __init__(self, pt1, pt2):
        self.pt1 = inkex.Vector2d(pt1)
        self.pt2 = inkex.Vector2d(pt2)

    def __repr__(self):
        return '<%s (%s) -> (%s)>' % \
            (self.__class__.__name__, self.pt1, self.pt2)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.pt1.is_close(other.pt1) and self.pt2.is_close(other.pt2)

    def __hash__(self):
        return hash((self.pt1.x, self.pt1.y, self.pt2.x, self.pt2.y))

    @property
    def angle(self):
        '''Return the angle in radians of the line through the segment.
        The angle is that of the line's slope, so it lies in (-pi/2, pi/2],
        and the sign of the direction is carried separately by
        is_positive_direction.'''
        dx = self.pt2.x - self.pt1.x
        dy = self.pt2.y - self.pt1.y
        if equals(dx, 0.0):
            return math.pi/2
        return math.atan(dy/dx)

    def is_positive_direction(self):
        'Return True if the segment runs in the positive direction.'
        return is_positive_direction(self.pt1, self.pt2)

    def reversed(self):
        'Return the same segment seen from its other end.'
        return Segment(self.pt2, self.pt1)

    @classmethod
    def from_path(cls, path, at_end=False):
        '''Return the segment at the start (or end) of an inkex.Path, or
        None if the path has fewer than two distinct points.'''
        pts = [inkex.Vector2d(p) for p in path.end_points]
        if at_end:
            pts.reverse()
        if len(pts) < 2:
            return None
        for pt in pts[1:]:
            if not pt.is_close(pts[0]):
                return cls(pts[0], pt)
        return None
