# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#
from .framerate import (
    NTSC, Framerate,
    F23_98, F24, F29_97_NDF, F29_97_DF, F30, F47_95, F48, F59_94_NDF, F59_94_DF, F60,
)
from .timecode import (
    Timecode, TimecodeSections, Comparison, frame_from_timecode, timecode_from_frame,
)
from .errors import (
    BadFramerateError, NegativeError, BadNtscError, ImpreciseError, BadDropFrameRateError,
    FormatError, BadDropFrameValueError,
)
