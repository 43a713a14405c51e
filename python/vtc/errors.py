# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#


# Some particular errors / exceptions apps might want to catch and handle


class BadFramerateError(ValueError):
    """
    Thin wrapper around ValueError for frame rate errors, allowing all of them
    to be caught easily.
    """
    def __init__(self, value, *args, **kwargs):
        """
        Instantiate a new BadFramerateError, setting a standard error message from
        the given value.

        :param value: The value which could not be turned into a frame rate.
        """
        super(BadFramerateError, self).__init__(
            "could not parse Framerate from [%s]: %s" % (value, self._error_message()),
            *args,
            **kwargs
        )
        # Store value internally, in case some apps want to retrieve it
        self._value = value

    @property
    def value(self):
        """
        Return the value which caused the error.
        """
        return self._value

    def _error_message(self):
        """
        Return a standard error message to use as the exception message.

        Deriving classes can return any arbitrary string describing the problem.

        :returns: A string
        """
        return "value not recognized"


class NegativeError(BadFramerateError):
    """
    Raised when a negative value is used to build a frame rate.
    """

    def _error_message(self):
        return "frame rates cannot be negative"


class BadNtscError(BadFramerateError):
    """
    Raised when an NTSC tag outside of the known :class:`NTSC` values is given.
    """

    def _error_message(self):
        return "NTSC value not recognized"


class ImpreciseError(BadFramerateError):
    """
    Raised when a float is given for a non-NTSC frame rate. Without an NTSC
    coercion there is no way to know which exact rate the float stands for.
    """

    def _error_message(self):
        return "non-NTSC frame rates cannot be parsed from floats due to imprecision"


class BadDropFrameRateError(BadFramerateError):
    """
    Raised when a drop frame rate playback is not a clean multiple of 30000/1001.
    """

    def _error_message(self):
        return ("drop frame rates must have a playback cleanly divisible "
                "by 30000/1001")


class FormatError(ValueError):
    """
    Thin wrapper around ValueError for values which do not match the grammar of
    the representation they are parsed as.
    """
    # Standard error message for format errors
    __ERROR_MSG = "[%s] is not a valid %s value"

    def __init__(self, value, format_name, *args, **kwargs):
        """
        Instantiate a new FormatError.

        :param value: The value which could not be parsed.
        :param format_name: A string, the name of the expected format, e.g. "timecode".
        """
        super(FormatError, self).__init__(
            self.__ERROR_MSG % (value, format_name),
            *args,
            **kwargs
        )
        self._value = value
        self._format_name = format_name

    @property
    def value(self):
        """
        Return the value which caused the error.
        """
        return self._value

    @property
    def format_name(self):
        """
        Return the name of the format the value was parsed as.

        :returns: A string
        """
        return self._format_name


class BadDropFrameValueError(ValueError):
    """
    Thin wrapper around ValueError for drop frame timecodes which use a frame
    number never displayed at their minute.
    """
    # Standard error message for bad drop frame values
    __ERROR_MSG = ("Invalid drop frame value [%d] at minute [%d], it must be "
                   "greater or equal to [%d] outside of every tenth minute")

    def __init__(self, frame_value, minutes, drop_frames, *args, **kwargs):
        """
        Instantiate a new BadDropFrameValueError.

        :param frame_value: An integer, the frames field which caused the error.
        :param minutes: An integer, the minutes field of the timecode.
        :param drop_frames: An integer, the number of frames dropped each minute.
        """
        super(BadDropFrameValueError, self).__init__(
            self.__ERROR_MSG % (frame_value, minutes, drop_frames),
            *args,
            **kwargs
        )
        self._frame_value = frame_value
        self._minutes = minutes
        self._drop_frames = drop_frames

    @property
    def frame_value(self):
        """
        Return the frames field which caused the error.

        :returns: An integer
        """
        return self._frame_value

    @property
    def minutes(self):
        """
        Return the minutes field of the offending timecode.

        :returns: An integer
        """
        return self._minutes

    @property
    def drop_frames(self):
        """
        Return the number of frames dropped each minute for the frame rate.

        :returns: An integer
        """
        return self._drop_frames
