# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#

import logging

# All loggers used in this package are children of this one.
ROOT_LOGGER_NAME = "vtc"

# Libraries stay silent unless the host application configures logging.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name=None):
    """
    Return a standard logger for this package.

    :param name: An optional string, the name of the child logger, typically
                 the short name of the calling module.
    :returns: A :class:`logging.Logger` instance.
    """
    if name:
        return logging.getLogger("%s.%s" % (ROOT_LOGGER_NAME, name))
    return logging.getLogger(ROOT_LOGGER_NAME)
