""">>> help(ExclusiveAccessGuard)"""

import contextlib
import logging
import threading

LOGGER = logging.getLogger('rastersession')

_CLOSED_MSG = 'Session already closed'

class ExclusiveAccessGuard(object):
    """Private class owning a gdal dataset and serializing all the operations performed on it.

    A `gdal.Dataset` object must not be used by two threads at the same time. The guard owns the
    only reference to it and only hands it out inside `acquire`.

    The guard is not reentrant: a thread that holds the access and requests it again gets a
    `RuntimeError` instead of a deadlock.

    Example
    -------
    >>> guard = ExclusiveAccessGuard(gdal_ds, 'dem.tif')
    ... with guard.acquire() as gdal_ds:
    ...     print(gdal_ds.RasterCount)
    1

    """

    def __init__(self, gdal_ds, name):
        self._name = name
        self._gdal_ds = gdal_ds
        self._lock = threading.Lock()
        self._counters_lock = threading.Lock()
        self._owner = None
        self._waiting = 0
        self._acquisitions = 0

    @property
    def closed(self):
        return self._gdal_ds is None

    @property
    def used_count(self):
        """Number of threads currently holding the access, 0 or 1"""
        with self._counters_lock:
            return int(self._owner is not None)

    @property
    def waiting_count(self):
        """Number of threads currently blocked in `acquire`"""
        with self._counters_lock:
            return self._waiting

    @property
    def acquisition_count(self):
        """Number of successful acquisitions since the creation of the guard"""
        with self._counters_lock:
            return self._acquisitions

    def acquire(self):
        """Return a context manager giving the sole right to use the gdal dataset

        Raises
        ------
        RuntimeError
            If the current thread already holds the access, or if the guard was closed
        """
        @contextlib.contextmanager
        def _acquire():
            ident = threading.get_ident()
            with self._counters_lock:
                if self._owner == ident:
                    raise RuntimeError(
                        'Re-entrant access to `{}` from the thread that already holds it'.format(
                            self._name
                        )
                    )
                self._waiting += 1

            try:
                if not self._lock.acquire(blocking=False):
                    LOGGER.debug('Waiting for access to `{}`'.format(self._name))
                    self._lock.acquire()
            finally:
                with self._counters_lock:
                    self._waiting -= 1

            try:
                with self._counters_lock:
                    self._owner = ident
                    self._acquisitions += 1
                if self._gdal_ds is None:
                    raise RuntimeError(_CLOSED_MSG)
                yield self._gdal_ds
            finally:
                with self._counters_lock:
                    self._owner = None
                self._lock.release()

        return _acquire()

    def close(self):
        """Drop the reference to the gdal dataset, after the current holder (if any) released it.
        The underlying file is closed by gdal when the last reference goes away.
        """
        with self.acquire():
            gdal_ds = self._gdal_ds
            self._gdal_ds = None
        del gdal_ds
        LOGGER.debug('Released gdal dataset of `{}`'.format(self._name))
