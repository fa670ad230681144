"""Private tools to convert the payload of a failed `GDALErrorCatcher` call to an exception"""

from osgeo import gdal

from rastersession._errors import (
    NotFoundError,
    UnsupportedFormatError,
    IoFailureError,
    WindowOutOfBoundsError,
)
from rastersession._tools import conv
from rastersession._tools.parameters import path_is_readable

def format_gdal_error(payload):
    """Human readable form of a failed `GDALErrorCatcher` payload"""
    code, msg = payload
    if not msg:
        msg = 'no message'
    if code == gdal.CPLE_None:
        return msg
    return '{}: {}'.format(conv.str_of_cple(code), msg)

def open_error_of_payload(path, payload):
    """Map the payload of a failed `gdal.OpenEx` to an exception.

    The file system is checked again because gdal reports a missing file and an unrecognized file
    with the same `CPLE_OpenFailed` error number.
    """
    code, _ = payload
    msg = 'Could not open `{}` (gdal error: `{}`)'.format(path, format_gdal_error(payload))
    if not path_is_readable(path):
        return NotFoundError(msg)
    if code == gdal.CPLE_FileIO:
        return IoFailureError(msg)
    return UnsupportedFormatError(msg)

def read_error_of_payload(context, payload):
    """Map the payload of a failed `Band.ReadRaster` to an exception"""
    code, _ = payload
    msg = 'Could not read {} (gdal error: `{}`)'.format(context, format_gdal_error(payload))
    if code == gdal.CPLE_IllegalArg:
        return WindowOutOfBoundsError(msg)
    return IoFailureError(msg)
