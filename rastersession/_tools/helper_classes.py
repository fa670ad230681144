""">>> help(GDALErrorCatcher)
>>> help(CallOrContext)
>>> help(Singleton)
"""

from osgeo import gdal

class GDALErrorCatcher:
    """Wrap a call to a gdal/osr function to streamline the behavior of gdal no matter the
    type of function and no matter the global states:
    - `gdal.*UseException` functions modify global states,
    - `gdal.*ErrorHandler` functions modify thread-local states.

    Using this wrapper makes gdal errors thread-safe, and no gdal exception ever escapes it.

    ### Type of gdal functions
    - Return `obj` on success, `None` on failure and trigger `error_handler`
      - `Band.ReadRaster`
    - Return `obj` on success, `None` on failure but may not trigger `error_handler`
      - `gdal.OpenEx`
      - `Dataset.GetRasterBand`
    - Return `str` on success, empty `str` on failure
      - `SpatialReference.ExportToProj4`

    Examples
    --------
    >>> success, payload = GDALErrorCatcher(gdal.OpenEx, none_is_error=True)('/missing.tif')
    ... print(success, payload)
    False (4, '/missing.tif: No such file or directory')

    >>> gdal_band = gdal_ds.GetRasterBand(1)
    ... success, payload = GDALErrorCatcher(gdal_band.ReadRaster, none_is_error=True)(0, 0, 1, 1)
    ... print(success, payload)
    True b'\\x00'

    """
    def __init__(self, fn, none_is_error=False, empty_is_error=False):
        self._fn = fn
        self._none_is_error = none_is_error
        self._empty_is_error = empty_is_error

    def __call__(self, *args, **kwargs):
        errs, res = None, None

        def error_handler(err_level, err_no, err_msg):
            nonlocal errs
            if err_level >= gdal.CE_Failure:
                errs = err_no, err_msg

        gdal.PushErrorHandler(error_handler)
        try:
            res = self._fn(*args, **kwargs)
        except Exception:
            if errs is None:
                # This is not a gdal error, this might be a swig error or something else
                raise
            # This is a gdal error, and `gdal.GetUseExceptions()` is True
            # Read problems from the `errs` variable, the details stored in this exception
            # are not reliable.
        finally:
            gdal.PopErrorHandler()

        if errs:
            return False, (errs[0], str(errs[1]).strip('\n'))
        if self._none_is_error and res is None:
            return False, (gdal.CPLE_None, str(gdal.GetLastErrorMsg()).strip('\n'))
        if self._empty_is_error and not res:
            return False, (gdal.CPLE_None, str(gdal.GetLastErrorMsg()).strip('\n'))
        return True, res

class CallOrContext(object):
    """Private helper class to provide a common behaviour both on call and on exit"""
    def __init__(self, obj, routine):
        self._obj = obj
        self._routine = routine

    def __call__(self):
        self._routine()

    def __enter__(self):
        return self._obj

    def __exit__(self, *args, **kwargs):
        self._routine()

class _Singleton(type):
    """ A metaclass that creates a Singleton base class when called.
    https://stackoverflow.com/questions/6760685/creating-a-singleton-in-python
    """
    _instances = {}
    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(_Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]

class Singleton(_Singleton('SingletonMeta', (object,), {})):
    pass
