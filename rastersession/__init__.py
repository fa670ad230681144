"""Welcome to rastersession, concurrent-safe read access to raster files through gdal

rastersession should always be imported the first time from the main thread
"""

__version__ = "0.1.0"

# Public classes
from rastersession._session import (
    Session,
    open,
)
from rastersession._datatype import (
    DataType,
    datatype_of_gdt,
    byte_width,
)
from rastersession._geo_transform import GeoTransform

from rastersession._env import Env

# Errors
from rastersession._errors import (
    ErrorKind,
    RasterSessionError,
    NotFoundError,
    UnsupportedFormatError,
    IoFailureError,
    InvalidBandIndexError,
    WindowOutOfBoundsError,
    UnsupportedDatatypeError,
    MalformedTransformError,
    NoSpatialReferenceError,
    NoSuchDomainError,
    error_of_kind,
)

# Misc
from rastersession._env import env
