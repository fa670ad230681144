""">>> help(Session)
>>> help(rastersession.open)
"""

import logging
import weakref

from osgeo import gdal

from rastersession import _tools
from rastersession._tools import (
    conv,
    GDALErrorCatcher,
    format_gdal_error,
    normalize_path,
    path_is_readable,
    normalize_drivers_parameter,
    normalize_open_options_parameter,
    open_error_of_payload,
)
from rastersession._access_guard import ExclusiveAccessGuard
from rastersession._session_back_band_types import BackSessionBandTypesMixin
from rastersession._session_back_window_reader import BackSessionWindowReaderMixin
from rastersession._session_back_georeference import BackSessionGeoreferenceMixin
from rastersession._session_back_metadata import BackSessionMetadataMixin
from rastersession._errors import NotFoundError, IoFailureError
from rastersession._env import env

LOGGER = logging.getLogger('rastersession')

_CLOSED_MSG = 'Session already closed'

class Session(object):
    """Read access to one raster file opened with gdal, shareable between threads.

    A Session owns a single `gdal.Dataset` and serializes all the operations performed on it, any
    number of threads may use the same Session at the same time. Sessions on distinct files do not
    block each other.

    >>> help(rastersession.open)

    The attributes `path`, `driver_name`, `band_count` and `raster_size` are read once when the
    file is opened. Reading them never calls gdal and never blocks.

    All the other methods call gdal and may block while another thread uses the Session. The
    failures are reported with the subclasses of `RasterSessionError`.

    Bands are indexed from 1 to `band_count` included.

    Example
    -------
    >>> import rastersession
    ... with rastersession.open('path/to/dem.tif') as session:
    ...     print(session.band_type(1), session.raster_size)
    ...     data = session.read_window(1, x=10, y=10, w=64, h=32)
    float32 (1024, 1024)

    """

    def __init__(self, back):
        self._back = back
        self._finalizer = weakref.finalize(self, _finalize_back, back)

    # Cheap accessors *************************************************************************** **
    @property
    def path(self):
        """Canonical path of the file, `~` expanded and absolute"""
        return self._back.path

    @property
    def driver_name(self):
        """Short name of the gdal driver that opened the file, like `'GTiff'`"""
        return self._back.driver_name

    @property
    def band_count(self):
        """Number of bands"""
        return self._back.band_count

    @property
    def raster_size(self):
        """Size of the raster in pixels, as `(width, height)`"""
        return self._back.raster_size

    @property
    def closed(self):
        """Was the Session closed"""
        return self._back.guard.closed

    def summary(self):
        """Dict of the values read when the file was opened

        Example
        -------
        >>> session.summary()
        {'path': '/data/dem.tif', 'driver_name': 'GTiff', 'band_count': 1, 'raster_size': (1024, 1024)}
        """
        return {
            'path': self.path,
            'driver_name': self.driver_name,
            'band_count': self.band_count,
            'raster_size': self.raster_size,
        }

    def __repr__(self):
        return '<{} path={!r} driver_name={!r} band_count={} raster_size={}{}>'.format(
            self.__class__.__name__,
            self.path, self.driver_name, self.band_count, self.raster_size,
            ' closed' if self.closed else '',
        )

    # Bands ************************************************************************************* **
    def band_type(self, band):
        """Get the datatype of a band

        Parameters
        ----------
        band: int
            1-based band index

        Returns
        -------
        DataType
            `DataType.unknown` for the gdal types without a portable equivalent

        Raises
        ------
        InvalidBandIndexError
        """
        self._check_open()
        return self._back.band_type(band)

    def band_description(self, band):
        """Get the description of a band, an empty string if it has none

        Raises
        ------
        InvalidBandIndexError
        """
        self._check_open()
        return self._back.band_description(band)

    def band_descriptions(self):
        """Get the descriptions of all bands, ordered by band index. The descriptions are read
        while the Session is held by the calling thread, so they come from a single consistent
        view of the file.
        """
        self._check_open()
        return self._back.band_descriptions()

    def no_data_value(self, band):
        """Get the no-data value of a band, None if it has none

        Raises
        ------
        InvalidBandIndexError
        """
        self._check_open()
        return self._back.no_data_value(band)

    # Pixels ************************************************************************************ **
    def read_band(self, band):
        """Read a full band, same as `read_window(band, 0, 0, *raster_size)`

        >>> help(Session.read_window)
        """
        self._check_open()
        return self._back.read_band(band)

    def read_window(self, band, x, y, w, h):
        """Read a rectangle of pixels from a band

        Parameters
        ----------
        band: int
            1-based band index
        x, y: int
            Pixel coordinates of the top left corner of the window
        w, h: int
            Size of the window in pixels, non-negative

        Returns
        -------
        bytes
            `w * h * band_type(band).byte_width` bytes, row-major, in the datatype of the band and
            in the byte order of the machine. No conversion and no no-data masking are performed.

        Raises
        ------
        InvalidBandIndexError
        WindowOutOfBoundsError
            If the window is not fully inside the raster. The window is never clamped. The check is
            performed in python unless `rastersession.env.check_window_bounds` is False, in which
            case gdal performs it.
        UnsupportedDatatypeError
            If `band_type(band)` is `DataType.unknown`
        IoFailureError
            If gdal fails to read, or returns a buffer of unexpected size

        Example
        -------
        >>> data = session.read_window(1, 0, 0, 2, 2)
        ... np.frombuffer(data, session.band_type(1).dtype).reshape(2, 2)
        array([[1, 2],
               [3, 4]], dtype=uint8)

        """
        self._check_open()
        return self._back.read_window(band, x, y, w, h)

    def read_window_array(self, band, x, y, w, h):
        """Read a rectangle of pixels from a band into a read-only numpy array of shape (h, w)

        >>> help(Session.read_window)
        """
        self._check_open()
        return self._back.read_window_array(band, x, y, w, h)

    # Georeference ****************************************************************************** **
    def geo_transform(self):
        """Get the geo transform of the file. Files without georeferencing have the
        `(0, 1, 0, 0, 0, 1)` transform.

        Returns
        -------
        GeoTransform

        Raises
        ------
        MalformedTransformError
        """
        self._check_open()
        return self._back.geo_transform()

    def spatial_ref_wkt(self):
        """Get the spatial reference of the file in wkt format

        Raises
        ------
        NoSpatialReferenceError
            If the file has no projection
        """
        self._check_open()
        return self._back.spatial_ref_wkt()

    def spatial_ref_proj4(self):
        """Get the spatial reference of the file in proj4 format

        Raises
        ------
        NoSpatialReferenceError
            If the file has no projection, or if it cannot be expressed in proj4
        """
        self._check_open()
        return self._back.spatial_ref_proj4()

    # Metadata ********************************************************************************** **
    def metadata_item(self, key, domain=''):
        """Get one metadata value

        Parameters
        ----------
        key: str
        domain: str
            `''` for the default domain

        Returns
        -------
        str or None
            None if the key is not set in that domain

        Raises
        ------
        NoSuchDomainError
            If the domain does not exist. The default domain always exists.
        """
        self._check_open()
        return self._back.metadata_item(key, domain)

    def metadata_domains(self):
        """Get the names of the metadata domains, in gdal's order. `''` is the default domain, it
        comes first when it is not empty.

        Returns
        -------
        list of str
        """
        self._check_open()
        return self._back.metadata_domains()

    def metadata_domain(self, domain=''):
        """Get the content of a metadata domain as a list of `'KEY=VALUE'` strings, in gdal's order

        Returns
        -------
        list of str or None
            None if the domain does not exist. The default domain always exists.
        """
        self._check_open()
        return self._back.metadata_domain(domain)

    # Cleanup *********************************************************************************** **
    @property
    def close(self):
        """Close the Session with a call or a context management.
        The `close` attribute returns an object that can be both called and used in a with statement

        Closing waits for the operation in progress in other threads (if any). A Session not
        closed is closed when garbage collected, with a warning.

        Examples
        --------
        >>> session = rastersession.open('dem.tif')
        ... # code...
        ... session.close()

        >>> with rastersession.open('dem.tif').close as session:
        ...     # code...

        Raises
        ------
        RuntimeError
            If the Session was already closed
        """
        def _close():
            self._check_open()
            self._finalizer.detach()
            self._back.close()

        return _CloseRoutine(self, _close)

    def __enter__(self):
        return self

    def __exit__(self, exc_type=None, exc_val=None, exc_tb=None):
        if self.closed:
            return
        self.close()

    def _check_open(self):
        if self._back.guard.closed:
            raise RuntimeError(_CLOSED_MSG)

class BackSession(BackSessionBandTypesMixin,
                  BackSessionWindowReaderMixin,
                  BackSessionGeoreferenceMixin,
                  BackSessionMetadataMixin):
    """Implementation of Session"""

    def __init__(self, path, drivers, options):
        gdal_ds = self.open_file(path, drivers, options)
        guard = ExclusiveAccessGuard(gdal_ds, path)
        del gdal_ds

        try:
            with guard.acquire() as gdal_ds:
                success, payload = GDALErrorCatcher(self._snapshot_of_gdal_ds)(gdal_ds)
            if not success:
                raise IoFailureError('Could not read the properties of `{}` (gdal error: `{}`)'.format(
                    path, format_gdal_error(payload)
                ))
        except BaseException:
            guard.close()
            raise
        driver_name, band_count, raster_size = payload

        self.path = path
        self.guard = guard
        self.driver_name = driver_name
        self.band_count = band_count
        self.raster_size = raster_size
        super(BackSession, self).__init__()

        LOGGER.info('Opened `{}` with driver `{}`, {}x{} pixels, {} band(s)'.format(
            path, driver_name, raster_size[0], raster_size[1], band_count,
        ))

    def close(self):
        self.guard.close()

    @staticmethod
    def open_file(path, drivers, options):
        """Open a raster dataset in read-only mode"""
        if not path_is_readable(path):
            raise NotFoundError('Could not open `{}` (file is missing or unreadable)'.format(path))

        success, payload = GDALErrorCatcher(gdal.OpenEx, none_is_error=True)(
            path,
            conv.of_of_mode('r') | conv.of_of_str('raster') | conv.of_of_str('verbose_error'),
            None if drivers is None else list(drivers),
            list(options),
        )
        if not success:
            raise open_error_of_payload(path, payload)
        return payload

    @staticmethod
    def _snapshot_of_gdal_ds(gdal_ds):
        gdal_driver = gdal_ds.GetDriver()
        if gdal_driver is None:
            raise IoFailureError(
                'Could not read the driver of `{}`'.format(gdal_ds.GetDescription())
            )
        driver_name = gdal_driver.ShortName
        band_count = int(gdal_ds.RasterCount)
        raster_size = (int(gdal_ds.RasterXSize), int(gdal_ds.RasterYSize))
        return driver_name, band_count, raster_size

def _finalize_back(back):
    if not back.guard.closed:
        LOGGER.warning('Closing `{}` on garbage collection, the Session was not closed'.format(
            back.path
        ))
        back.close()

_CloseRoutine = type('_CloseRoutine', (_tools.CallOrContext,), {
    '__doc__': Session.close.__doc__,
})

def open(path, drivers=None, options=None): # pylint: disable=redefined-builtin
    """Open a raster file in read-only mode

    Parameters
    ----------
    path: str or os.PathLike
        `~` is expanded and the path is made absolute. Paths of gdal's virtual file systems, like
        `/vsimem/a.tif` or `/vsizip/a.zip/b.tif`, are accepted and kept as is.
    drivers: None or str or sequence of str
        Short names of the gdal drivers allowed to open the file, like `['GTiff']`.
        If None, `rastersession.env.allowed_drivers` is used (all drivers by default).
    options: None or sequence of str
        gdal open options, like `['NUM_THREADS=2']`.
        If None, `rastersession.env.open_options` is used (none by default).

    Returns
    -------
    Session

    Raises
    ------
    NotFoundError
        If the file is missing or unreadable. gdal is not called for local files.
    UnsupportedFormatError
        If no allowed driver recognizes the file
    IoFailureError
        If gdal reports an I/O error

    Example
    -------
    >>> session = rastersession.open('~/data/dem.tif', drivers='GTiff')
    ... session.summary()
    {'path': '/home/user/data/dem.tif', 'driver_name': 'GTiff', 'band_count': 1, 'raster_size': (1024, 1024)}

    """
    path = normalize_path(path)
    if drivers is None:
        drivers = env.allowed_drivers
    else:
        drivers = normalize_drivers_parameter(drivers)
    if options is None:
        options = env.open_options
    else:
        options = normalize_open_options_parameter(options)
    return Session(BackSession(path, drivers, options))
