from rastersession._tools import GDALErrorCatcher, format_gdal_error, normalize_band_index
from rastersession._datatype import datatype_of_gdt
from rastersession._errors import IoFailureError

class BackSessionBandTypesMixin(object):
    """Private mixin for the BackSession class containing the band accessors shared by all the
    band scoped operations"""

    def band_type(self, band):
        band = normalize_band_index(band, self.band_count)
        with self.guard.acquire() as gdal_ds:
            gdal_band = self.gdal_band_of_gdal_ds(gdal_ds, band)
            gdt = gdal_band.DataType
        return datatype_of_gdt(gdt)

    def gdal_band_of_gdal_ds(self, gdal_ds, band):
        """Retrieve a `gdal.Band` from a `gdal.Dataset`, the guard should be held by the caller"""
        success, payload = GDALErrorCatcher(gdal_ds.GetRasterBand, none_is_error=True)(band)
        if not success: # pragma: no cover
            raise IoFailureError('Could not access band {} of `{}` (gdal error: `{}`)'.format(
                band, self.path, format_gdal_error(payload)
            ))
        return payload
