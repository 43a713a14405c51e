# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#

import collections
import decimal
import enum
import functools
import re
from fractions import Fraction

from . import drop_frame
from .errors import FormatError
from .framerate import NTSC, Framerate
from .logger import get_logger
from .rational import floor_divmod, round_half_up, to_fraction

logger = get_logger("timecode")

DROP_FRAME_DELIMITER = ";"
NON_DROP_FRAME_DELIMITER = ":"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60

# Adobe Premiere Pro divides every second in this many ticks, whatever the
# frame rate is.
PREMIERE_TICKS_PER_SECOND = 254016000000

# 35mm, 4-perf film.
FRAMES_PER_FOOT = 16

DEFAULT_RUNTIME_PRECISION = 9

# Hours, minutes and seconds are optional. Whatever is present is matched from
# the left, so the groups are re-assigned from the frames place when parsing.
_TIMECODE_REGEXP = re.compile(
    r"(?P<negative>-)?"
    r"((?P<section1>\d+)[:;])?"
    r"((?P<section2>\d+)[:;])?"
    r"((?P<section3>\d+)[:;])?"
    r"(?P<frames>\d+)"
)
_RUNTIME_REGEXP = re.compile(
    r"(?P<negative>-)?"
    r"((?P<section1>\d+):)?"
    r"((?P<section2>\d+):)?"
    r"(?P<seconds>\d+(\.\d+)?)"
)
_FEET_AND_FRAMES_REGEXP = re.compile(r"(?P<negative>-)?(?P<feet>\d+)\+(?P<frames>\d+)")

# Scalar types accepted by arithmetic operators.
_SCALAR_TYPES = (int, Fraction, decimal.Decimal, float)


TimecodeSections = collections.namedtuple(
    "TimecodeSections",
    ["is_negative", "hours", "minutes", "seconds", "frames"],
)
TimecodeSections.__doc__ = """
The individual display fields of a timecode, for a single frame rate.
"""


class Comparison(enum.IntEnum):
    """
    Result of :meth:`Timecode.compare`.
    """
    LT = -1
    EQ = 0
    GT = 1

    def __str__(self):
        return self.name


def _match(regexp, value, format_name):
    """
    Match the given value against one of our regular expressions.

    :raises: FormatError if the value does not match.
    """
    m = None
    if isinstance(value, str):
        m = regexp.fullmatch(value)
    if not m:
        raise FormatError(value, format_name)
    return m


def _shifted_sections(m, names):
    """
    Return the optional groups present in the given match, as ints, with the
    group closest to the right first.
    """
    return [int(m.group(name)) for name in reversed(names) if m.group(name) is not None]


def frame_from_timecode(timecode, rate):
    """
    Return the frame number for the given timecode.

    :param timecode: A timecode string in ``hh:mm:ss:ff`` format.
    :param rate: A :class:`Framerate` instance.
    :returns: Corresponding frame number, as an int.
    """
    return Timecode.from_timecode(timecode, rate).frames


def timecode_from_frame(frame_number, rate):
    """
    Return the timecode corresponding to the given frame.

    :param frame_number: A frame number, as an int.
    :param rate: A :class:`Framerate` instance.
    :returns: Timecode as string, e.g. '01:02:12:32' (non-drop frame) or
              '01:02:12;32' (drop frame)
    """
    return Timecode.from_frames(frame_number, rate).to_timecode()


@functools.total_ordering
class Timecode(object):
    """
    A frame accurate position on a timeline.

    A Timecode holds the exact number of real world seconds elapsed since
    00:00:00:00, as a :class:`Fraction`, and the :class:`Framerate` it runs at.
    The seconds value always lands on a frame boundary for the rate.

    Timecodes are immutable: parsers, arithmetic and rebasing all return new
    instances.
    """
    __slots__ = ("_seconds", "_rate")

    def __init__(self, seconds, rate):
        """
        Instantiate a new Timecode.

        :param seconds: Real world seconds, as a :class:`Fraction` or anything
                        :func:`to_fraction` accepts. The value is rounded to the
                        nearest frame for the given rate.
        :param rate: A :class:`Framerate` instance.
        """
        if not isinstance(rate, Framerate):
            raise TypeError("Unsupported frame rate type %s" % type(rate))
        seconds = to_fraction(seconds)
        playback = rate.playback
        frames = seconds * playback
        if frames.denominator != 1:
            quantized = round_half_up(frames) / playback
            logger.debug(
                "Rounding %s seconds to %s for frame rate %s" % (seconds, quantized, rate)
            )
            seconds = quantized
        self._seconds = seconds
        self._rate = rate

    @classmethod
    def from_seconds(cls, seconds, rate):
        """
        Return a new :class:`Timecode` for the given real world seconds.

        :param seconds: A :class:`Fraction`, an int, a :class:`decimal.Decimal`,
                        a float or a string like "3/2". Rounded to the nearest frame.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        """
        return cls(seconds, rate)

    @classmethod
    def from_frames(cls, frames, rate):
        """
        Return a new :class:`Timecode` for the given frame count, at the given rate.

        :param frames: A frame count, as an int.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        """
        return cls(to_fraction(frames) / rate.playback, rate)

    @classmethod
    def from_premiere_ticks(cls, ticks, rate):
        """
        Return a new :class:`Timecode` for a number of Adobe Premiere Pro ticks.

        The result is rounded to the nearest frame.

        :param ticks: Number of ticks, as an int.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        """
        return cls(Fraction(to_fraction(ticks), PREMIERE_TICKS_PER_SECOND), rate)

    @classmethod
    def from_timecode(cls, timecode, rate):
        """
        Parse a timecode string, e.g. "01:00:00:00" or "01:00:00;02".

        Hours, minutes and seconds can be omitted: "3:12" is three seconds and
        twelve frames. Fields which overflowed their place are accepted,
        "00:00:00:48" at 24 fps is "00:00:02:00".

        :param timecode: A string in ``[-][hh:][mm:][ss:]ff`` format.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        :raises: FormatError if the string can't be parsed, BadDropFrameValueError
                 if it names a frame which drop frame timecode never displays.
        """
        m = _match(_TIMECODE_REGEXP, timecode, "timecode")
        sections = _shifted_sections(m, ["section1", "section2", "section3"])
        sections.extend([0] * (3 - len(sections)))
        seconds, minutes, hours = sections
        sections = TimecodeSections(
            is_negative=m.group("negative") is not None,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=int(m.group("frames")),
        )

        timebase = rate.timebase
        total_seconds = (
            sections.hours * SECONDS_PER_HOUR
            + sections.minutes * SECONDS_PER_MINUTE
            + sections.seconds
        )
        frames = int(round_half_up(total_seconds * timebase + sections.frames))
        if rate.ntsc is NTSC.DROP:
            frames += drop_frame.parse_adjustment(sections, timebase.numerator)
        if sections.is_negative:
            frames = -frames
        return cls.from_frames(frames, rate)

    @classmethod
    def from_runtime(cls, runtime, rate):
        """
        Parse a real world runtime string, e.g. "01:00:03.6".

        The result is rounded to the nearest frame.

        :param runtime: A string in ``[-][hh:][mm:]ss[.ffffff]`` format.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        :raises: FormatError if the string can't be parsed.
        """
        m = _match(_RUNTIME_REGEXP, runtime, "runtime")
        sections = _shifted_sections(m, ["section1", "section2"])
        sections.extend([0] * (2 - len(sections)))
        minutes, hours = sections
        seconds = Fraction(m.group("seconds"))
        seconds += hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
        if m.group("negative"):
            seconds = -seconds
        return cls(seconds, rate)

    @classmethod
    def from_feet_and_frames(cls, feet_and_frames, rate):
        """
        Parse a 35mm 4-perf feet and frames string, e.g. "5400+13".

        :param feet_and_frames: A string in ``[-]feet+frames`` format.
        :param rate: A :class:`Framerate` instance.
        :returns: A :class:`Timecode` instance.
        :raises: FormatError if the string can't be parsed.
        """
        m = _match(_FEET_AND_FRAMES_REGEXP, feet_and_frames, "feet and frames")
        frames = int(m.group("feet")) * FRAMES_PER_FOOT + int(m.group("frames"))
        if m.group("negative"):
            frames = -frames
        return cls.from_frames(frames, rate)

    @property
    def rate(self):
        """
        Return the :class:`Framerate` of this timecode.
        """
        return self._rate

    @property
    def seconds(self):
        """
        Return the real world seconds elapsed between 00:00:00:00 and this timecode.

        With NTSC rates the displayed timecode drifts from this value, which is
        what should be used for lossless playback time calculations, e.g. when
        adding timecodes with different frame rates.

        :returns: A :class:`Fraction`.
        """
        return self._seconds

    @property
    def frames(self):
        """
        Return the number of frames elapsed between 00:00:00:00 and this timecode.

        '01:00:00:00' at 23.98 is frame 86400.

        :returns: An int.
        """
        return int(round_half_up(self._seconds * self._rate.playback))

    @property
    def is_negative(self):
        """
        Return True if this timecode is before 00:00:00:00.
        """
        return self._seconds < 0

    def sections(self):
        """
        Return the individual display fields of this timecode.

        :returns: A :class:`TimecodeSections` instance.
        :raises: ValueError if the frame rate timebase is not a whole number.
        """
        timebase = self._rate.timebase
        if timebase.denominator != 1:
            raise ValueError(
                "Timecode fields can't be computed for frame rate %s, its timebase "
                "%s is not a whole number" % (self._rate, timebase)
            )
        timebase = timebase.numerator

        frames = abs(self.frames)
        if self._rate.ntsc is NTSC.DROP:
            frames += drop_frame.display_adjustment(frames, timebase)

        hours, frames = divmod(frames, SECONDS_PER_HOUR * timebase)
        minutes, frames = divmod(frames, SECONDS_PER_MINUTE * timebase)
        seconds, frames = divmod(frames, timebase)
        return TimecodeSections(
            is_negative=self.is_negative,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=frames,
        )

    def to_timecode(self):
        """
        Return the SMPTE timecode string for this timecode, e.g. '01:00:00:00',
        or '01:00:00;00' for drop frame rates.

        :returns: A string.
        :raises: ValueError if the frame rate timebase is not a whole number.
        """
        sections = self.sections()
        if self._rate.ntsc is NTSC.DROP:
            frames_token = DROP_FRAME_DELIMITER
        else:
            frames_token = NON_DROP_FRAME_DELIMITER
        return "%s%02d:%02d:%02d%s%02d" % (
            "-" if sections.is_negative else "",
            sections.hours,
            sections.minutes,
            sections.seconds,
            frames_token,
            sections.frames,
        )

    def to_runtime(self, precision=DEFAULT_RUNTIME_PRECISION):
        """
        Return the real world runtime of this timecode, e.g. '01:00:03.6'.

        Trailing zeros are removed from the fractional seconds, but at least one
        digit is always kept.

        :param precision: Maximum number of decimal places, as an int.
        :returns: A string.
        """
        seconds = round_half_up(abs(self._seconds), precision)
        hours, seconds = floor_divmod(seconds, Fraction(SECONDS_PER_HOUR))
        minutes, seconds = floor_divmod(seconds, Fraction(SECONDS_PER_MINUTE))
        whole_seconds = int(seconds)
        digits = "%0*d" % (precision, int((seconds - whole_seconds) * 10 ** precision))
        digits = digits[:precision].rstrip("0") or "0"
        return "%s%02d:%02d:%02d.%s" % (
            "-" if self.is_negative else "",
            int(hours),
            int(minutes),
            whole_seconds,
            digits,
        )

    def to_premiere_ticks(self):
        """
        Return the number of Adobe Premiere Pro ticks elapsed for this timecode.

        :returns: An int.
        """
        return int(round_half_up(self._seconds * PREMIERE_TICKS_PER_SECOND))

    def to_feet_and_frames(self):
        """
        Return the 35mm 4-perf feet and frames for this timecode, e.g. '5400+13'.

        :returns: A string.
        """
        feet, frames = divmod(abs(self.frames), FRAMES_PER_FOOT)
        return "%s%d+%02d" % ("-" if self.is_negative else "", feet, frames)

    def add(self, other):
        """
        Return the sum of this timecode and another one, or a number of frames.

        Mixed frame rates are allowed, the result is rounded to a frame of this
        timecode frame rate.

        :param other: A :class:`Timecode` instance or an int number of frames.
        :returns: A new :class:`Timecode` instance, at this timecode frame rate.
        """
        return self.__class__(self._seconds + self._operand_seconds(other, "+"), self._rate)

    def sub(self, other):
        """
        Return the difference of this timecode and another one, or a number of frames.

        :param other: A :class:`Timecode` instance or an int number of frames.
        :returns: A new :class:`Timecode` instance, at this timecode frame rate.
        """
        return self.__class__(self._seconds - self._operand_seconds(other, "-"), self._rate)

    def mul(self, scalar):
        """
        Return this timecode multiplied by a scalar, rounded to the nearest frame.

        :param scalar: An int, a :class:`Fraction`, a :class:`decimal.Decimal`,
                       a float or a rational string.
        :returns: A new :class:`Timecode` instance.
        """
        return self.__class__(self._seconds * to_fraction(scalar), self._rate)

    def div(self, scalar):
        """
        Return this timecode divided by a scalar.

        Division is floor division of the frame count, so the result always
        lands on a frame.

        :param scalar: A non zero scalar, see :meth:`mul`.
        :returns: A new :class:`Timecode` instance.
        """
        return self.divmod(scalar)[0]

    def divmod(self, scalar):
        """
        Return the floor division of this timecode frame count by a scalar, and
        the remainder of this division.

        :param scalar: A non zero scalar, see :meth:`mul`.
        :returns: A (dividend, remainder) tuple of new :class:`Timecode` instances.
        """
        dividend, remainder = floor_divmod(Fraction(self.frames), to_fraction(scalar))
        return (
            self.from_frames(dividend, self._rate),
            self.from_frames(round_half_up(remainder), self._rate),
        )

    def mod(self, scalar):
        """
        Return the remainder of the floor division of this timecode frame count
        by a scalar.

        :param scalar: A non zero scalar, see :meth:`mul`.
        :returns: A new :class:`Timecode` instance.
        """
        return self.divmod(scalar)[1]

    def neg(self):
        """
        Return the negated version of this timecode.
        """
        return self.__class__(-self._seconds, self._rate)

    def abs(self):
        """
        Return the absolute value of this timecode.
        """
        if self.is_negative:
            return self.neg()
        return self

    def compare(self, other):
        """
        Compare this timecode with another one.

        Real world seconds are compared, not frame counts or timecode strings:
        '01:00:00:00' at 23.98 NTSC is greater than '01:00:00:00' at 24 fps
        since NTSC playback is slower.

        :param other: A :class:`Timecode` instance.
        :returns: A :class:`Comparison` value.
        """
        if not isinstance(other, Timecode):
            raise TypeError("Can't compare Timecode with %s" % type(other))
        if self._seconds < other._seconds:
            return Comparison.LT
        if self._seconds > other._seconds:
            return Comparison.GT
        return Comparison.EQ

    def rebase(self, rate):
        """
        Return a timecode with the same frame count running at another frame rate.

        The real world seconds value changes with the playback speed.

        :param rate: A :class:`Framerate` instance.
        :returns: A new :class:`Timecode` instance.
        """
        return self.from_frames(self.frames, rate)

    def _operand_seconds(self, other, operator):
        """
        Return the real world seconds of an addition or subtraction operand.
        """
        if isinstance(other, Timecode):
            return other._seconds
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other) / self._rate.playback
        raise TypeError("Unsupported operand type %s for %s" % (type(other), operator))

    # Redefine some standard operators.
    def __add__(self, right):
        """
        + operator override: add a :class:`Timecode` or a number of frames.
        """
        if isinstance(right, (Timecode, int)):
            return self.add(right)
        return NotImplemented

    def __radd__(self, left):
        """
        + operator override, with a number of frames on the left.
        """
        return self.__add__(left)

    def __sub__(self, right):
        """
        - operator override: subtract a :class:`Timecode` or a number of frames.
        """
        if isinstance(right, (Timecode, int)):
            return self.sub(right)
        return NotImplemented

    def __rsub__(self, left):
        """
        - operator override, with a number of frames on the left.
        """
        if isinstance(left, int) and not isinstance(left, bool):
            return self.from_frames(left, self._rate).sub(self)
        return NotImplemented

    def __mul__(self, right):
        if isinstance(right, _SCALAR_TYPES) and not isinstance(right, bool):
            return self.mul(right)
        return NotImplemented

    def __rmul__(self, left):
        return self.__mul__(left)

    def __floordiv__(self, right):
        if isinstance(right, _SCALAR_TYPES) and not isinstance(right, bool):
            return self.div(right)
        return NotImplemented

    def __mod__(self, right):
        if isinstance(right, _SCALAR_TYPES) and not isinstance(right, bool):
            return self.mod(right)
        return NotImplemented

    def __divmod__(self, right):
        if isinstance(right, _SCALAR_TYPES) and not isinstance(right, bool):
            return self.divmod(right)
        return NotImplemented

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.compare(other) is Comparison.EQ

    def __lt__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.compare(other) is Comparison.LT

    def __hash__(self):
        return hash(self._seconds)

    def __str__(self):
        """
        String representation of this :class:`Timecode` instance, e.g.
        '01:00:00:00 @ 23.98 NTSC NDF'.
        """
        if self._rate.timebase.denominator != 1:
            # No timecode fields for these rates, show the runtime instead.
            return "%s @ %s" % (self.to_runtime(), self._rate)
        return "%s @ %s" % (self.to_timecode(), self._rate)

    def __repr__(self):
        """
        Code representation of this :class:`Timecode` instance.
        """
        return "<class %s %s>" % (self.__class__.__name__, self)
