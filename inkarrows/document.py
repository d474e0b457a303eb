#! /usr/bin/env python

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

import re
import inkex
from inkex.localization import inkex_gettext as _
from .errors import collector
from .marker_decoder import decode
from .marker_encoder import MARKER_END, MARKER_START, encode
from .owner import LineOwner
from .parameters import NUMERIC_FIELDS, ArrowParameters
from .styles import ArrowStyle


def _abend(msg):
    'Abnormally end execution with an error message.'
    raise inkex.AbortExtension(msg)


def _check_role(role):
    'Raise ValueError if role is not a marker attribute.'
    if role not in (MARKER_START, MARKER_END):
        raise ValueError('unknown marker role %s' % repr(role))


def _document_root(node):
    'Return the SVG document containing a node.'
    root = node.getroottree().getroot()
    if not isinstance(root, inkex.SvgDocumentElement):
        raise ValueError('%s is not part of an SVG document' % repr(node))
    return root


def line_reduction(params, owner):
    '''Return the distance by which a line should be shortened so that it
    does not poke through the tip of its arrowhead.'''
    if params.style.needs_line_reduction and params.has_style(owner):
        return params.arrow_width(owner.full_thickness)
    return 0.0


def attach_arrow(node, params, owner, role=None):
    '''Encode an arrowhead as a marker, store the marker in the document's
    <defs>, and make the node refer to it.  role defaults to the end
    implied by params.is_left_arrow.  If the arrowhead is not drawn, any
    existing reference is removed.  Return the marker or None.'''
    if role is None:
        role = MARKER_START if params.is_left_arrow else MARKER_END
    _check_role(role)
    style = node.style
    marker = encode(params, owner)
    if marker is None:
        if role in style:
            del style[role]
        node.style = style
        return None
    _document_root(node).defs.append(marker)
    style[role] = marker.get_id(as_url=2)
    node.style = style
    return marker


def _marker_reference(node, role):
    "Return the ID of the marker a node uses for a role or None."
    value = node.style.get(role)
    if value is None:
        value = node.get(role)
    if value is None:
        return None
    match = re.match(r'\s*url\(\s*#([^)\s]+)\s*\)', value)
    if match is None:
        return None
    return match.group(1)


def read_arrows(node, owner=None, errors=None):
    '''Return a (start, end) pair of ArrowParameters describing the
    arrowheads a node refers to.  A missing or unresolvable marker yields
    parameters with style NONE.'''
    if owner is None:
        owner = LineOwner.from_element(node, errors)
    root = _document_root(node)
    arrows = []
    for role in (MARKER_START, MARKER_END):
        params = ArrowParameters(is_left_arrow=role == MARKER_START)
        ident = _marker_reference(node, role)
        if ident is not None:
            marker = root.getElementById(ident)
            if marker is not None and \
               marker.tag == inkex.addNS('marker', 'svg'):
                decode(marker, owner, role, params, errors)
        arrows.append(params)
    return tuple(arrows)


# ----------------------------------------------------------------------

class ArrowheadsExtension(inkex.EffectExtension):
    'Decorate the ends of the selected lines with arrowheads.'

    # Shapes that can carry markers.
    marker_shapes = (inkex.PathElement, inkex.Line, inkex.Polyline)

    def add_arguments(self, pars):
        'Process program parameters passed in from the UI.'
        pars.add_argument('--tab', dest='tab',
                          help='The selected UI tab when OK was pressed')
        pars.add_argument('--start-style', type=str, default='none',
                          help='Arrowhead at the start of each line'
                               ' (PSTricks token or style name)')
        pars.add_argument('--end-style', type=str, default='>',
                          help='Arrowhead at the end of each line'
                               ' (PSTricks token or style name)')
        pars.add_argument('--start-inverted', type=inkex.Boolean,
                          default=False,
                          help='Flip the starting arrowhead inward')
        pars.add_argument('--end-inverted', type=inkex.Boolean,
                          default=False,
                          help='Flip the ending arrowhead inward')
        for name in NUMERIC_FIELDS:
            opt = '--' + name.replace('_', '-')
            if name.endswith('_dim'):
                pars.add_argument(opt, type=str,
                                  help='Absolute part of %s, with units' %
                                  name[:-4].replace('_', ' '))
            else:
                pars.add_argument(opt, type=float,
                                  help='Value of %s' % name.replace('_', ' '))

    def numeric_options(self):
        '''Return the numeric arrow parameters specified on the command
        line, with absolute sizes converted to user units.'''
        fields = {}
        for name in NUMERIC_FIELDS:
            val = getattr(self.options, name)
            if val is None:
                continue
            if name.endswith('_dim'):
                val = self.svg.unittouu(val)
            fields[name] = val
        return fields

    def arrow_parameters(self, role):
        'Return the parameters of the arrowhead to draw at one end.'
        if role == MARKER_START:
            style = self.options.start_style
            inverted = self.options.start_inverted
        else:
            style = self.options.end_style
            inverted = self.options.end_inverted
        try:
            return ArrowParameters.with_defaults(ArrowStyle.parse(style),
                                                 inverted,
                                                 role == MARKER_START,
                                                 **self.numeric_options())
        except ValueError as err:
            _abend(_('invalid arrowhead: %s') % err)

    def effect(self):
        'Attach arrowheads to every selected line-like shape.'
        nodes = list(self.svg.selection.filter(*self.marker_shapes).values())
        if len(nodes) == 0:
            _abend(_('select at least one path, line, or polyline'))
        arrows = [self.arrow_parameters(role)
                  for role in (MARKER_START, MARKER_END)]
        for node in nodes:
            owner = LineOwner.from_element(node)
            for params in arrows:
                attach_arrow(node, params, owner)
        collector.report()


def main():
    ArrowheadsExtension().run()


if __name__ == '__main__':
    main()
