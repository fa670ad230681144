"""Private tools to normalize functions parameters"""

import numbers
import os

from osgeo import gdal

from rastersession._errors import InvalidBandIndexError, WindowOutOfBoundsError

def normalize_path(path):
    """Expand `~` and make `path` absolute. Symbolic links are not resolved.

    Paths of gdal's virtual file systems (`/vsimem/`, `/vsizip/`, `/vsicurl/`...) are kept as is.
    """
    try:
        path = os.fspath(path)
    except TypeError:
        raise TypeError('`path` should be a str or an os.PathLike, found a `{}`'.format(
            type(path)
        ))
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    if is_vsi_path(path):
        return path
    return os.path.abspath(os.path.expanduser(path))

def is_vsi_path(path):
    return path.startswith('/vsi')

def path_is_readable(path):
    """Check that `path` exists and can be read, through gdal for virtual file systems"""
    if is_vsi_path(path):
        return gdal.VSIStatL(path) is not None
    return os.path.exists(path) and os.access(path, os.R_OK)

def _normalize_integer(val, name):
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise TypeError('`{}` should be an integer, found a `{}`'.format(name, type(val)))
    return int(val)

def normalize_band_index(band, band_count):
    """Check a 1-based band index against `1..=band_count`, never clamp it"""
    band = _normalize_integer(band, 'band')
    if not 1 <= band <= band_count:
        if band_count == 0:
            msg = 'Band index {} is invalid, the dataset has no band'.format(band)
        else:
            msg = 'Band index {} is invalid, expected a value between 1 and {}'.format(
                band, band_count
            )
        raise InvalidBandIndexError(msg)
    return band

def normalize_window(x, y, w, h):
    """Check the types of a window, and that its size is non-negative"""
    x = _normalize_integer(x, 'x')
    y = _normalize_integer(y, 'y')
    w = _normalize_integer(w, 'w')
    h = _normalize_integer(h, 'h')
    if w < 0 or h < 0:
        raise WindowOutOfBoundsError(
            'Window size should be non-negative, found ({}, {})'.format(w, h)
        )
    return x, y, w, h

def check_window_in_raster(x, y, w, h, raster_size):
    """Raise if the window (x, y, w, h) is not fully inside a raster of size (width, height)"""
    width, height = raster_size
    if x < 0 or y < 0 or x + w > width or y + h > height:
        raise WindowOutOfBoundsError(
            'Window (x={}, y={}, w={}, h={}) is out of the raster extent {}x{}'.format(
                x, y, w, h, width, height
            )
        )

def normalize_drivers_parameter(drivers):
    """Normalize the `drivers` parameter to None or a tuple of gdal short names"""
    if drivers is None:
        return None
    if isinstance(drivers, str):
        drivers = [drivers]
    drivers = tuple(drivers)
    for driver in drivers:
        if not isinstance(driver, str):
            raise TypeError('Expecting a `str` or a `sequence of str` for `drivers`, found a `{}`'.format(
                type(driver)
            ))
    if len(drivers) == 0:
        raise ValueError('`drivers` should not be empty, use None to allow all drivers')
    return drivers

def normalize_open_options_parameter(options):
    """Normalize the `options` parameter to a tuple of `KEY=VALUE` strings"""
    if isinstance(options, str):
        options = [options]
    options = tuple(str(opt) for opt in options)
    for opt in options:
        if '=' not in opt:
            raise ValueError('Open option `{}` should be of the form `KEY=VALUE`'.format(opt))
    return options
