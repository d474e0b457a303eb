#############################################################
# Define a set of unit tests for line segments and for      #
# drawing arrowheads as shapes.                             #
# Author: Scott Pakin <scott-ink@pakin.org>                 #
#############################################################

from inkarrows.numeric import angle_is_zero, equals, format_number, is_zero
from inkarrows.owner import LineOwner
from inkarrows.parameters import ArrowParameters
from inkarrows.render import render, should_invert
from inkarrows.segment import Segment, is_positive_direction
from inkarrows.styles import ArrowStyle
from inkex.paths import Arc
from inkex.tester import TestCase
import inkex
import math


def _points(obj):
    'Return the end points of a PathElement as (x, y) tuples.'
    return [(pt.x, pt.y) for pt in obj.path.end_points]


class NumericTest(TestCase):
    'Compare floating-point numbers.'

    def test_equals(self):
        assert equals(1.0, 1.0 + 1e-7)
        assert not equals(1.0, 1.001)
        assert is_zero(-1e-9)

    def test_angle_is_zero(self):
        assert angle_is_zero(0.0)
        assert angle_is_zero(2*math.pi)
        assert angle_is_zero(-4*math.pi)
        assert not angle_is_zero(math.pi)

    def test_format_number(self):
        assert format_number(3) == '3'
        assert format_number(0.5) == '0.5'
        assert format_number(1/3) == '0.3333333333'


class SegmentTest(TestCase):
    'Orient line segments.'

    def test_direction(self):
        assert is_positive_direction((0, 0), (10, 0))
        assert not is_positive_direction((10, 0), (0, 0))
        assert is_positive_direction((5, 0), (5, 10))
        assert not is_positive_direction((5, 10), (5, 0))

    def test_direction_symmetry(self):
        pts = [(0, 0), (3, 4), (-2, 7), (3, -1), (0, 5)]
        for p1 in pts:
            for p2 in pts:
                if p1 == p2:
                    continue
                assert is_positive_direction(p1, p2) != \
                    is_positive_direction(p2, p1)

    def test_angle(self):
        assert Segment((0, 0), (10, 0)).angle == 0
        assert Segment((5, 0), (5, 10)).angle == math.pi/2
        assert Segment((5, 10), (5, 0)).angle == math.pi/2
        assert equals(Segment((0, 0), (10, 10)).angle, math.pi/4)
        assert equals(Segment((10, 10), (0, 0)).angle, math.pi/4)

    def test_reversed(self):
        seg = Segment((1, 2), (3, 4))
        assert seg.reversed() == Segment((3, 4), (1, 2))
        assert seg.reversed().reversed() == seg

    def test_from_path(self):
        path = inkex.Path('M 0 0 L 0 0 L 10 0 L 10 10')
        assert Segment.from_path(path) == Segment((0, 0), (10, 0))
        assert Segment.from_path(path, at_end=True) == \
            Segment((10, 10), (10, 0))
        assert Segment.from_path(inkex.Path('M 3 3')) is None


class RenderTest(TestCase):
    'Draw arrowheads as inkex shapes.'

    def setUp(self):
        super().setUp()
        self.right = Segment((0, 0), (10, 0))
        self.left = Segment((10, 0), (0, 0))

    def test_bar_in(self):
        params = ArrowParameters(ArrowStyle.BAR_IN,
                                 bar_size_num=5, bar_size_dim=1)
        arrow = render(params, self.right, LineOwner(thickness=2))
        assert len(arrow) == 1
        pts = _points(arrow.elements[0])
        assert equals(pts[0][0], 1) and equals(pts[1][0], 1)
        assert equals(pts[0][1], -5.5) and equals(pts[1][1], 5.5)
        pts = _points(render(params, self.left,
                             LineOwner(thickness=2)).elements[0])
        assert equals(pts[0][0], 9)

    def test_bar_end(self):
        params = ArrowParameters(ArrowStyle.BAR_END, bar_size_num=4)
        arrow = render(params, self.right, LineOwner())
        pts = _points(arrow.elements[0])
        assert pts == [(0, -2), (0, 2)]
        style = arrow.elements[0].style
        assert style.get('stroke-width') == '1'

    def test_thickness_scaling(self):
        for style in (ArrowStyle.BAR_END, ArrowStyle.LEFT_SQUARE_BRACKET):
            params = ArrowParameters(style, bar_size_num=5,
                                     bracket_length_ratio=0.15)
            box1 = render(params, self.right,
                          LineOwner(thickness=1)).bounding_box()
            box3 = render(params, self.right,
                          LineOwner(thickness=3)).bounding_box()
            assert equals(box3.height, 3*box1.height)
            assert equals(box3.width, 3*box1.width)
            assert equals(box3.left, 3*box1.left)

    def test_rotation(self):
        params = ArrowParameters(ArrowStyle.BAR_END, bar_size_num=4)
        arrow = render(params, Segment((0, 0), (0, 10)), LineOwner())
        box = arrow.bounding_box()
        assert equals(box.width, 4)
        assert is_zero(box.height)
        assert arrow.elements[0].get('transform') is not None

    def test_arrow_directions(self):
        params = ArrowParameters(ArrowStyle.LEFT_ARROW, arrow_size_num=2,
                                 arrow_length_ratio=1.5,
                                 arrow_inset_ratio=0.5)
        owner = LineOwner()
        box = render(params, self.right, owner).bounding_box()
        assert is_zero(box.left) and equals(box.right, 3)
        assert equals(box.height, 2)
        box = render(params, self.left, owner).bounding_box()
        assert equals(box.left, 7) and equals(box.right, 10)

        # Inverted arrowheads keep their extent but point inward.
        params.inverted = True
        arrow = render(params, self.right, owner)
        box = arrow.bounding_box()
        assert is_zero(box.left) and equals(box.right, 3)
        assert equals(_points(arrow.elements[0])[0][0], 3)

    def test_double_arrow(self):
        params = ArrowParameters(ArrowStyle.RIGHT_DBLE_ARROW,
                                 arrow_size_num=2, arrow_length_ratio=1,
                                 arrow_inset_ratio=0)
        arrow = render(params, self.right, LineOwner())
        box = arrow.bounding_box()
        assert equals(box.width, 4)
        assert len(_points(arrow.elements[0])) == 10
        assert should_invert(params, self.right)
        assert not should_invert(params, self.left)

    def test_dots(self):
        owner = LineOwner(thickness=2, line_color='blue',
                          fill_color='yellow', fillable=True)
        params = ArrowParameters(ArrowStyle.DISK_IN, dot_size_num=2)
        disk = render(params, self.right, owner).elements[0]
        assert isinstance(disk, inkex.Circle)
        assert float(disk.get('cx')) == 2
        assert float(disk.get('r')) == 2
        assert disk.style.get('fill') == str(owner.line_color)
        params.style = ArrowStyle.CIRCLE_END
        circle = render(params, self.right, owner).elements[0]
        assert float(circle.get('cx')) == 0
        assert float(circle.get('r')) == 1
        assert circle.style.get('fill') == str(owner.fill_color)
        assert circle.style.get('stroke') == str(owner.line_color)

    def test_round_bracket(self):
        params = ArrowParameters(ArrowStyle.LEFT_ROUND_BRACKET,
                                 bar_size_num=4,
                                 round_bracket_length_ratio=0.25)
        arrow = render(params, self.right, LineOwner())
        cmds = list(arrow.elements[0].path)
        assert isinstance(cmds[1], Arc)
        box = arrow.bounding_box()
        assert 0 < box.height <= 4 + 1e-5
        assert box.left > -0.01 and box.right < 0.5

    def test_round_bracket_directions(self):
        params = ArrowParameters(ArrowStyle.LEFT_ROUND_BRACKET,
                                 bar_size_num=4,
                                 round_bracket_length_ratio=0.25)
        owner = LineOwner()

        # The bulge touches pt1 and the bracket opens toward the line.
        box = render(params, self.right, owner).bounding_box()
        assert abs(box.left) < 0.01 and box.right < 0.5
        box = render(params, self.left, owner).bounding_box()
        assert abs(box.right - 10) < 0.01 and box.left > 9.5

        # Inverted brackets open away from the line.
        params.inverted = True
        box = render(params, self.right, owner).bounding_box()
        assert abs(box.right) < 0.01 and box.left < -0.3

    def test_square_bracket_arms(self):
        params = ArrowParameters(ArrowStyle.LEFT_SQUARE_BRACKET,
                                 bar_size_num=4, bracket_length_ratio=0.25)
        owner = LineOwner()
        pts = _points(render(params, self.right, owner).elements[0])
        assert equals(pts[0][0], 0.5) and equals(pts[3][0], 2)
        pts = _points(render(params, self.left, owner).elements[0])
        assert equals(pts[0][0], 9.5) and equals(pts[3][0], 8)
        params.inverted = True
        pts = _points(render(params, self.right, owner).elements[0])
        assert equals(pts[0][0], 0.5) and equals(pts[3][0], -1)

    def test_dots_in_negative_direction(self):
        owner = LineOwner(thickness=2)
        params = ArrowParameters(ArrowStyle.DISK_IN, dot_size_num=2)
        disk = render(params, self.left, owner).elements[0]
        assert float(disk.get('cx')) == 8
        assert float(disk.get('r')) == 2
        params.style = ArrowStyle.CIRCLE_IN
        circle = render(params, self.left, owner).elements[0]
        assert float(circle.get('cx')) == 8
        assert float(circle.get('r')) == 1

    def test_inverted_start_double_arrow(self):
        # Arrows at the start of a line are placed like those at the end.
        for left in (False, True):
            params = ArrowParameters(ArrowStyle.LEFT_DBLE_ARROW, True, left,
                                     arrow_size_num=2, arrow_length_ratio=1,
                                     arrow_inset_ratio=0)
            arrow = render(params, self.right, LineOwner())
            box = arrow.bounding_box()
            assert is_zero(box.left) and equals(box.right, 4)
            assert equals(_points(arrow.elements[0])[0][0], 4)

    def test_minimal(self):
        owner = LineOwner(thickness=2)
        for style, cap in [(ArrowStyle.SQUARE_END, 'square'),
                           (ArrowStyle.ROUND_END, 'round'),
                           (ArrowStyle.ROUND_IN, 'round')]:
            arrow = render(ArrowParameters(style), self.right, owner)
            assert len(arrow) == 1
            assert arrow.elements[0].style.get('stroke-linecap') == cap
        arrow = render(ArrowParameters(ArrowStyle.ROUND_IN), self.right,
                       owner)
        assert _points(arrow.elements[0])[0] == (1, 0)

    def test_nothing_to_render(self):
        params = ArrowParameters(ArrowStyle.NONE, arrow_size_num=3)
        arrow = render(params, self.right, LineOwner())
        assert len(arrow) == 0
        assert arrow.bounding_box() is None
        params.style = ArrowStyle.RIGHT_ARROW
        assert len(render(params, None, LineOwner())) == 0
        hidden = LineOwner(stroke_visible=False)
        assert len(render(params, self.right, hidden)) == 0

    def test_group_and_svg(self):
        params = ArrowParameters(ArrowStyle.DISK_END, dot_size_num=2)
        arrow = render(params, self.right, LineOwner())
        grp = arrow.group()
        assert isinstance(grp, inkex.Group)
        assert len(grp) == 1
        text = arrow.svg()
        assert 'circle' in text
