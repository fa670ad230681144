from rastersession._tools import GDALErrorCatcher, format_gdal_error, normalize_band_index
from rastersession._errors import IoFailureError, NoSuchDomainError

class BackSessionMetadataMixin(object):
    """Private mixin for the BackSession class containing the metadata and band descriptions
    accessors.

    The default domain `''` always exists, even when it is empty. The other domains exist only if
    gdal lists them in `GetMetadataDomainList`.
    """

    # Metadata ********************************************************************************** **
    def metadata_item(self, key, domain=''):
        _check_str(key, 'key')
        _check_str(domain, 'domain')
        with self.guard.acquire() as gdal_ds:
            if domain != '' and domain not in self._metadata_domains_of_gdal_ds(gdal_ds):
                raise NoSuchDomainError('`{}` has no metadata domain `{}`'.format(
                    self.path, domain
                ))
            success, payload = GDALErrorCatcher(gdal_ds.GetMetadataItem)(key, domain)
        if not success: # pragma: no cover
            raise IoFailureError('Could not read metadata `{}` of `{}` (gdal error: `{}`)'.format(
                key, self.path, format_gdal_error(payload)
            ))
        return payload

    def metadata_domains(self):
        with self.guard.acquire() as gdal_ds:
            return self._metadata_domains_of_gdal_ds(gdal_ds)

    def metadata_domain(self, domain=''):
        _check_str(domain, 'domain')
        with self.guard.acquire() as gdal_ds:
            if domain != '' and domain not in self._metadata_domains_of_gdal_ds(gdal_ds):
                return None
            return self._metadata_list_of_gdal_ds(gdal_ds, domain)

    def _metadata_domains_of_gdal_ds(self, gdal_ds):
        success, payload = GDALErrorCatcher(gdal_ds.GetMetadataDomainList)()
        if not success: # pragma: no cover
            raise IoFailureError('Could not list metadata domains of `{}` (gdal error: `{}`)'.format(
                self.path, format_gdal_error(payload)
            ))
        domains = list(payload or [])
        if self._metadata_list_of_gdal_ds(gdal_ds, ''):
            domains = [''] + [d for d in domains if d != '']
        return domains

    def _metadata_list_of_gdal_ds(self, gdal_ds, domain):
        success, payload = GDALErrorCatcher(gdal_ds.GetMetadata_List)(domain)
        if not success: # pragma: no cover
            raise IoFailureError('Could not read metadata domain `{}` of `{}` (gdal error: `{}`)'.format(
                domain, self.path, format_gdal_error(payload)
            ))
        return list(payload or [])

    # Bands ************************************************************************************* **
    def band_description(self, band):
        band = normalize_band_index(band, self.band_count)
        with self.guard.acquire() as gdal_ds:
            return self._band_description_of_gdal_ds(gdal_ds, band)

    def band_descriptions(self):
        with self.guard.acquire() as gdal_ds:
            return [
                self._band_description_of_gdal_ds(gdal_ds, band)
                for band in range(1, self.band_count + 1)
            ]

    def no_data_value(self, band):
        band = normalize_band_index(band, self.band_count)
        with self.guard.acquire() as gdal_ds:
            gdal_band = self.gdal_band_of_gdal_ds(gdal_ds, band)
            success, payload = GDALErrorCatcher(gdal_band.GetNoDataValue)()
        if not success: # pragma: no cover
            raise IoFailureError('Could not read no-data value of band {} of `{}` (gdal error: `{}`)'.format(
                band, self.path, format_gdal_error(payload)
            ))
        if payload is None:
            return None
        return float(payload)

    def _band_description_of_gdal_ds(self, gdal_ds, band):
        gdal_band = self.gdal_band_of_gdal_ds(gdal_ds, band)
        success, payload = GDALErrorCatcher(gdal_band.GetDescription)()
        if not success: # pragma: no cover
            raise IoFailureError('Could not read description of band {} of `{}` (gdal error: `{}`)'.format(
                band, self.path, format_gdal_error(payload)
            ))
        return payload

def _check_str(val, name):
    if not isinstance(val, str):
        raise TypeError('`{}` should be a str, found a `{}`'.format(name, type(val)))
