# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#

"""
Frame number adjustments for NTSC drop frame timecode.

For a good discussion around drop frame timecode and sample code, see
https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/

No frame is ever dropped from the media itself. Drop frame timecode skips some
frame *numbers* instead, so the displayed timecode stays roughly in sync with
the wall clock although the media plays at timebase * 1000 / 1001 fps: the
first frame numbers of every minute are skipped, except for every tenth minute.

Example at the one minute mark, 29.97 DF, where 2 frame numbers are dropped:

    frame: 1798  ND: 00:00:59:28  D: 00:00:59;28
    frame: 1799  ND: 00:00:59:29  D: 00:00:59;29
    frame: 1800  ND: 00:01:00:00  D: 00:01:00;02
    frame: 1801  ND: 00:01:00:01  D: 00:01:00;03

and past the tenth minute, where nothing is dropped:

    frame: 19781 ND: 00:10:59:11  D: 00:10:59;29
    frame: 19782 ND: 00:10:59:12  D: 00:11:00;02
    frame: 19783 ND: 00:10:59:13  D: 00:11:00;03
"""

from fractions import Fraction

from .errors import BadDropFrameValueError
from .logger import get_logger
from .rational import round_half_up

logger = get_logger("drop_frame")

# Number of frames to drop is 6% of the timebase, rounded to nearest integer.
_DROP_FRAMES_RATIO = Fraction("0.066666")


def frames_to_drop(timebase):
    """
    Return the number of frame numbers skipped at the start of a drop minute.

    30 fps gives 2, 60 fps gives 4.

    :param timebase: The integer timebase of the frame rate.
    :returns: An int.
    """
    return int(round_half_up(timebase * _DROP_FRAMES_RATIO))


def display_adjustment(frame_number, timebase):
    """
    Return the number of frames to add to a frame count to get the frame
    number displayed in drop frame timecode.

    :param frame_number: A non negative frame count, as an int.
    :param timebase: The integer timebase of the frame rate.
    :returns: An int.
    """
    drop_frames = frames_to_drop(timebase)
    frames_per_minute = timebase * 60
    # Frames in a minute starting with dropped frame numbers.
    # 30fps: 30 * 60 - 2 = 1798
    frames_per_drop_minute = frames_per_minute - drop_frames
    # Frames in ten minutes: 9 drop minutes plus one whole minute.
    # 30fps: 1798 * 9 + 1800 = 17982
    frames_per_10_minutes = frames_per_drop_minute * 9 + frames_per_minute

    ten_minute_chunks, remaining_frames = divmod(frame_number, frames_per_10_minutes)
    # Frame numbers are dropped in 9 minutes out of every 10.
    adjustment = 9 * drop_frames * ten_minute_chunks

    # The first minute of every 10 minutes chunk is a whole minute.
    if remaining_frames < frames_per_minute:
        return adjustment

    # One second of frames is removed here, not the whole first minute.
    remaining_frames -= timebase
    adjustment += drop_frames
    adjustment += drop_frames * (remaining_frames // frames_per_drop_minute)
    return adjustment


def parse_adjustment(sections, timebase):
    """
    Return the number of frames to add to a frame count computed from drop frame
    timecode fields, to get the actual frame count.

    The returned value is negative or zero: it removes the frame numbers which
    were skipped up to the given timecode.

    :param sections: A :class:`TimecodeSections`, the parsed timecode fields.
    :param timebase: The integer timebase of the frame rate.
    :returns: An int.
    :raises: BadDropFrameValueError if the frames field is lower than the number
             of dropped frames outside of every tenth minute.
    """
    drop_frames = frames_to_drop(timebase)
    if sections.frames < drop_frames and sections.minutes % 10 != 0:
        logger.debug(
            "Frame %d is dropped at minute %d" % (sections.frames, sections.minutes)
        )
        raise BadDropFrameValueError(sections.frames, sections.minutes, drop_frames)

    total_minutes = 60 * sections.hours + sections.minutes
    # Drop frame numbers for every minute but every tenth one.
    return -drop_frames * (total_minutes - total_minutes // 10)
