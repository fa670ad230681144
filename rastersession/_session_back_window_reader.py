import logging

import numpy as np

from rastersession._tools import (
    conv,
    GDALErrorCatcher,
    normalize_band_index,
    normalize_window,
    check_window_in_raster,
    read_error_of_payload,
)
from rastersession._datatype import datatype_of_gdt
from rastersession._errors import IoFailureError, UnsupportedDatatypeError
from rastersession._env import env

LOGGER = logging.getLogger('rastersession')

class BackSessionWindowReaderMixin(object):
    """Private mixin for the BackSession class containing the pixel reading subroutines"""

    def read_band(self, band):
        width, height = self.raster_size
        return self.read_window(band, 0, 0, width, height)

    def read_window(self, band, x, y, w, h):
        band = normalize_band_index(band, self.band_count)
        x, y, w, h = normalize_window(x, y, w, h)
        if env.check_window_bounds or w == 0 or h == 0:
            check_window_in_raster(x, y, w, h, self.raster_size)
        if w == 0 or h == 0:
            return b''

        with self.guard.acquire() as gdal_ds:
            gdal_band = self.gdal_band_of_gdal_ds(gdal_ds, band)
            gdt = gdal_band.DataType
            datatype = datatype_of_gdt(gdt)
            if datatype.byte_width is None:
                raise UnsupportedDatatypeError(
                    'Band {} of `{}` has an unsupported datatype `{}`'.format(
                        band, self.path, conv.str_of_gdt(gdt)
                    )
                )
            success, payload = GDALErrorCatcher(gdal_band.ReadRaster, none_is_error=True)(
                x, y, w, h, buf_type=gdt,
            )

        context = 'window (x={}, y={}, w={}, h={}) of band {} of `{}`'.format(
            x, y, w, h, band, self.path
        )
        if not success:
            raise read_error_of_payload(context, payload)
        data = bytes(payload)

        expected = w * h * datatype.byte_width
        if len(data) != expected: # pragma: no cover
            raise IoFailureError('Could not read {} (expected {} bytes, got {})'.format(
                context, expected, len(data)
            ))
        LOGGER.debug('Read {} ({} bytes)'.format(context, len(data)))
        return data

    def read_window_array(self, band, x, y, w, h):
        dtype = self.band_type(band).dtype
        if dtype is None:
            raise UnsupportedDatatypeError(
                'Band {} of `{}` has an unsupported datatype'.format(band, self.path)
            )
        data = self.read_window(band, x, y, w, h)
        _, _, w, h = normalize_window(x, y, w, h)
        return np.frombuffer(data, dtype=dtype).reshape(h, w)
