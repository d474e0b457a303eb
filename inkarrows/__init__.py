from .document import ArrowheadsExtension, attach_arrow, line_reduction, \
    main, read_arrows
from .errors import ErrorCollector, collector
from .marker_decoder import decode
from .marker_encoder import MARKER_END, MARKER_START, encode, marker_role
from .numeric import EPSILON, angle_is_zero, equals, is_zero
from .owner import LineOwner
from .parameters import ArrowParameters, arrow_defaults, pop_defaults, \
    push_defaults
from .render import RenderedArrow, render, should_invert
from .segment import Segment, is_positive_direction
from .styles import ArrowStyle
