""">>> help(RasterSessionError)
>>> help(ErrorKind)
"""

import enum

class ErrorKind(enum.Enum):
    """Closed set of the failures a Session may report"""
    not_found = 'not_found'
    unsupported_format = 'unsupported_format'
    io_failure = 'io_failure'
    invalid_band_index = 'invalid_band_index'
    window_out_of_bounds = 'window_out_of_bounds'
    unsupported_datatype = 'unsupported_datatype'
    malformed_transform = 'malformed_transform'
    no_spatial_reference = 'no_spatial_reference'
    no_such_domain = 'no_such_domain'

class RasterSessionError(Exception):
    """Base class of all the errors raised by rastersession.

    Attributes
    ----------
    kind: ErrorKind
    message: str
        Human readable message, derived from the gdal error text when there is one
    """

    kind = None

    def __init__(self, message):
        self.message = message
        super(RasterSessionError, self).__init__(message)

class NotFoundError(RasterSessionError):
    """The file is missing or unreadable"""
    kind = ErrorKind.not_found

class UnsupportedFormatError(RasterSessionError):
    """No gdal driver recognizes the file"""
    kind = ErrorKind.unsupported_format

class IoFailureError(RasterSessionError):
    """Generic I/O error reported by gdal"""
    kind = ErrorKind.io_failure

class InvalidBandIndexError(RasterSessionError):
    """Band index outside of `1..=band_count`"""
    kind = ErrorKind.invalid_band_index

class WindowOutOfBoundsError(RasterSessionError):
    """Window not fully inside the raster extent"""
    kind = ErrorKind.window_out_of_bounds

class UnsupportedDatatypeError(RasterSessionError):
    """Band datatype without a known byte width"""
    kind = ErrorKind.unsupported_datatype

class MalformedTransformError(RasterSessionError):
    """Geo transform that is not made of 6 floats, or that cannot be inverted"""
    kind = ErrorKind.malformed_transform

class NoSpatialReferenceError(RasterSessionError):
    """The dataset carries no projection"""
    kind = ErrorKind.no_spatial_reference

class NoSuchDomainError(RasterSessionError):
    """The metadata domain does not exist"""
    kind = ErrorKind.no_such_domain

_ERROR_OF_KIND = {
    cls.kind: cls
    for cls in [
        NotFoundError,
        UnsupportedFormatError,
        IoFailureError,
        InvalidBandIndexError,
        WindowOutOfBoundsError,
        UnsupportedDatatypeError,
        MalformedTransformError,
        NoSpatialReferenceError,
        NoSuchDomainError,
    ]
}
assert set(_ERROR_OF_KIND) == set(ErrorKind)

def error_of_kind(kind, message):
    """Instanciate the exception matching an ErrorKind"""
    return _ERROR_OF_KIND[ErrorKind(kind)](message)

