from osgeo import osr

from rastersession._tools import GDALErrorCatcher, format_gdal_error
from rastersession._geo_transform import GeoTransform
from rastersession._errors import IoFailureError, MalformedTransformError, NoSpatialReferenceError

class BackSessionGeoreferenceMixin(object):
    """Private mixin for the BackSession class containing the geo transform and spatial reference
    accessors"""

    def geo_transform(self):
        with self.guard.acquire() as gdal_ds:
            success, payload = GDALErrorCatcher(gdal_ds.GetGeoTransform)()
        if not success:
            raise MalformedTransformError(
                'Could not read the geo transform of `{}` (gdal error: `{}`)'.format(
                    self.path, format_gdal_error(payload)
                )
            )
        return GeoTransform.from_gdal(payload)

    def spatial_ref_wkt(self):
        with self.guard.acquire() as gdal_ds:
            success, payload = GDALErrorCatcher(gdal_ds.GetProjection)()
        if not success: # pragma: no cover
            raise IoFailureError(
                'Could not read the projection of `{}` (gdal error: `{}`)'.format(
                    self.path, format_gdal_error(payload)
                )
            )
        if not payload:
            raise NoSpatialReferenceError('`{}` has no spatial reference'.format(self.path))
        return payload

    def spatial_ref_proj4(self):
        wkt = self.spatial_ref_wkt()

        success, payload = GDALErrorCatcher(osr.SpatialReference, none_is_error=True)(wkt)
        if success:
            sr = payload
            success, payload = GDALErrorCatcher(sr.ExportToProj4, empty_is_error=True)()
        if not success:
            raise NoSpatialReferenceError(
                'The spatial reference of `{}` has no proj4 equivalent (gdal error: `{}`)'.format(
                    self.path, format_gdal_error(payload)
                )
            )
        return payload
