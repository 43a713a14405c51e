# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#

"""
Frame rates, as exact rational values.

When building NTSC frame rates, the playback speed is rounded to the nearest
valid NTSC value of n/1001, so ``24`` and ``23.98`` are both coerced to
``24000/1001``. Non-NTSC frame rates are kept as-is, since there is no
distinction between their playback and their timebase. Floats are rejected
for non-NTSC frame rates: they are not precise enough to know with certainty
which exact rate is wanted.
"""

import enum
import re
from fractions import Fraction

from .errors import (
    BadDropFrameRateError,
    BadNtscError,
    FormatError,
    ImpreciseError,
    NegativeError,
)
from .logger import get_logger
from .rational import round_half_up, to_fraction

logger = get_logger("framerate")

# Drop frame playbacks multiplied by this value must give an integer, i.e. they
# must be a multiple of 30000/1001 (29.97 NTSC). For why, see
# https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
_DROP_FRAME_DIVISOR = Fraction(1001, 30000)

# Accepted string forms.
_INT_REGEXP = re.compile(r"^[+-]?\d+$")
_FLOAT_REGEXP = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RATIONAL_REGEXP = re.compile(r"^(?P<numerator>[+-]?\d+)/(?P<denominator>\d+)$")


class NTSC(enum.IntEnum):
    """
    Whether and how a frame rate follows the NTSC standard.
    """
    NONE = 0
    NON_DROP = 1
    DROP = 2

    @property
    def is_ntsc(self):
        """
        Return True for NTSC values, drop frame or not.
        """
        return self is not NTSC.NONE

    @classmethod
    def coerce(cls, value):
        """
        Return the :class:`NTSC` member for the given value.

        :param value: An :class:`NTSC` member or its integer value.
        :returns: An :class:`NTSC` member.
        :raises: BadNtscError if the value is not a known NTSC value.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise BadNtscError(value)
        try:
            return cls(value)
        except ValueError:
            raise BadNtscError(value)

    def __str__(self):
        return _NTSC_LABELS[self]


_NTSC_LABELS = {
    NTSC.NONE: "fps",
    NTSC.NON_DROP: "NTSC NDF",
    NTSC.DROP: "NTSC DF",
}


def _parse_framerate_string(text):
    """
    Parse an int, float or rational frame rate string.

    Some tools report the timebase as seconds-per-frame, "1/24", rather than
    frames-per-second, "24/1". Rationals with a numerator smaller than their
    denominator are inverted.

    :param text: A string.
    :returns: A :class:`Fraction`, or a float for float strings.
    :raises: FormatError if the string is not in a recognized format.
    """
    value = text.strip()
    if _INT_REGEXP.match(value):
        return Fraction(int(value))
    if _FLOAT_REGEXP.match(value):
        return float(value)
    m = _RATIONAL_REGEXP.match(value)
    if m:
        numerator = int(m.group("numerator"))
        denominator = int(m.group("denominator"))
        if denominator != 0:
            if 0 < numerator < denominator:
                return Fraction(denominator, numerator)
            return Fraction(numerator, denominator)
    raise FormatError(text, "framerate")


class Framerate(object):
    """
    The rate at which frames are played back, in frames per second.

    A Framerate is immutable. It holds an exact playback speed and an
    :class:`NTSC` tag:

    - ``playback`` is the real world speed, e.g. 24000/1001 for 23.98 NTSC,
      and is used for every duration calculation.
    - ``timebase`` is the speed timecode is displayed at, e.g. 24 for 23.98
      NTSC. For non-NTSC rates it is the same as the playback.
    """
    __slots__ = ("_playback", "_ntsc")

    def __init__(self, value, ntsc=NTSC.NONE):
        """
        Instantiate a new Framerate from the given value.

        :param value: An int, a :class:`Fraction`, a :class:`decimal.Decimal`, a
                      float or a string. Floats are only accepted for NTSC rates.
                      For NTSC rates the value can be the playback speed or the
                      timebase, e.g. 24000/1001, 23.98 or 24.
        :param ntsc: An :class:`NTSC` value.
        :raises: BadNtscError, NegativeError, ImpreciseError, BadDropFrameRateError
                 or FormatError if the value is invalid.
        """
        ntsc = NTSC.coerce(ntsc)
        if isinstance(value, Framerate):
            value = value.playback
        if isinstance(value, str):
            value = _parse_framerate_string(value)
        if isinstance(value, float):
            if not ntsc.is_ntsc:
                raise ImpreciseError(value)
            value = Fraction(value)
        playback = to_fraction(value)

        if playback < 0:
            raise NegativeError(value)

        if ntsc.is_ntsc and playback.denominator != 1001:
            coerced = Fraction(int(round_half_up(playback)) * 1000, 1001)
            if coerced != playback:
                logger.debug("Coercing %s to NTSC playback %s" % (playback, coerced))
            playback = coerced

        if ntsc is NTSC.DROP and (playback * _DROP_FRAME_DIVISOR).denominator != 1:
            raise BadDropFrameRateError(value)

        self._playback = playback
        self._ntsc = ntsc

    @classmethod
    def from_rational(cls, value, ntsc=NTSC.NONE):
        """
        Return a new :class:`Framerate` from a rational value.

        If ntsc is not NTSC.NONE, the value is coerced to the nearest valid NTSC
        rate by rounding it to the nearest whole number and putting that number
        times 1000 over a denominator of 1001.

        :param value: A :class:`Fraction`, or anything :func:`to_fraction` accepts.
        :param ntsc: An :class:`NTSC` value.
        :returns: A :class:`Framerate` instance.
        """
        return cls(to_fraction(value), ntsc)

    @classmethod
    def from_int(cls, value, ntsc=NTSC.NONE):
        """
        Return a new :class:`Framerate` from an int.

        For NTSC rates the int is taken as the timebase, so 24 gives 24000/1001.

        :param value: An int.
        :param ntsc: An :class:`NTSC` value.
        :returns: A :class:`Framerate` instance.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Unsupported int type %s" % type(value))
        return cls(Fraction(value), ntsc)

    @classmethod
    def from_float(cls, value, ntsc=NTSC.NONE):
        """
        Return a new :class:`Framerate` from a float.

        :param value: A float.
        :param ntsc: An :class:`NTSC` value.
        :returns: A :class:`Framerate` instance.
        :raises: ImpreciseError if ntsc is NTSC.NONE.
        """
        return cls(float(value), ntsc)

    @classmethod
    def from_string(cls, value, ntsc=NTSC.NONE):
        """
        Return a new :class:`Framerate` from a string.

        Accepted forms are ints ('24'), floats ('23.98') and rationals ('24/1'
        or '1/24').

        :param value: A string.
        :param ntsc: An :class:`NTSC` value.
        :returns: A :class:`Framerate` instance.
        :raises: FormatError if the string is not in a recognized format.
        """
        return cls(str(value), ntsc)

    @property
    def playback(self):
        """
        Return the real world playback speed, in frames per second.

        :returns: A :class:`Fraction`.
        """
        return self._playback

    @property
    def timebase(self):
        """
        Return the speed timecode is displayed at, in frames per second.

        :returns: A :class:`Fraction`, a whole number for NTSC rates.
        """
        if self._ntsc is NTSC.NONE:
            return self._playback
        return round_half_up(self._playback)

    @property
    def ntsc(self):
        """
        Return the :class:`NTSC` standard this frame rate follows.
        """
        return self._ntsc

    def __eq__(self, other):
        if not isinstance(other, Framerate):
            return NotImplemented
        return self._playback == other._playback and self._ntsc is other._ntsc

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._playback, self._ntsc))

    def __str__(self):
        """
        String representation of this :class:`Framerate`, e.g. "23.98 NTSC NDF".
        """
        if self._playback.denominator == 1:
            playback = "%d" % self._playback.numerator
        else:
            playback = "%.2f" % float(self._playback)
        return "%s %s" % (playback, self._ntsc)

    def __repr__(self):
        return "<class %s %s>" % (self.__class__.__name__, self)


# Some common frame rates.
F23_98 = Framerate(24, NTSC.NON_DROP)
F24 = Framerate(24, NTSC.NONE)
F29_97_NDF = Framerate(30, NTSC.NON_DROP)
F29_97_DF = Framerate(30, NTSC.DROP)
F30 = Framerate(30, NTSC.NONE)
F47_95 = Framerate(48, NTSC.NON_DROP)
F48 = Framerate(48, NTSC.NONE)
F59_94_NDF = Framerate(60, NTSC.NON_DROP)
F59_94_DF = Framerate(60, NTSC.DROP)
F60 = Framerate(60, NTSC.NONE)
