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


class ErrorCollector():
    '''Gather errors that were recovered from so that they can be shown to
    the user later.  Collecting never interrupts the operation that ran
    into the error.'''

    def __init__(self):
        self.errors = []

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def add(self, err):
        'Record an exception (or a message) without raising it.'
        self.errors.append(err)

    def clear(self):
        'Forget all recorded errors.'
        self.errors = []

    def report(self):
        '''Write all recorded errors to the user via inkex and forget
        them.'''
        for err in self.errors:
            if isinstance(err, Exception):
                msg = '%s: %s' % (err.__class__.__name__, err)
            else:
                msg = str(err)
            inkex.utils.errormsg(msg)
        self.clear()


# Errors are recorded here when the caller does not supply a collector.
collector = ErrorCollector()


def parse_float(value, default, errors=None):
    '''Convert an attribute string to a float.  Return default if the
    attribute is absent or not a number; in the latter case the error is
    recorded rather than raised.'''
    if value is None:
        return default
    try:
        num = float(value)
        if not math.isfinite(num):
            raise ValueError('%s is not a finite number' % repr(value))
        return num
    except (TypeError, ValueError) as err:
        if errors is None:
            errors = collector
        errors.add(err)
        return default
