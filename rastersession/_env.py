""">>> help(rastersession.env)
>>> help(rastersession.Env)
"""

import threading
from collections import namedtuple, ChainMap
import functools

from rastersession._tools import (
    Singleton,
    normalize_drivers_parameter,
    normalize_open_options_parameter,
)

# Sanitization ********************************************************************************** **
def _sanitize_bool(val):
    if not isinstance(val, bool):
        raise ValueError('Expecting a bool, found a `{}`'.format(type(val)))
    return val

# Options declaration *************************************************************************** **
_EnvOption = namedtuple('_Option', 'sanitize, bottom_value')
_OPTIONS = {
    'check_window_bounds': _EnvOption(_sanitize_bool, True),
    'allowed_drivers': _EnvOption(normalize_drivers_parameter, None),
    'open_options': _EnvOption(normalize_open_options_parameter, ()),
}

# Storage *************************************************************************************** **
class _GlobalMapStack:
    """ChainMap updated to behave like a singleton stack"""

    _main_storage = None

    def __init__(self, bottom=None):
        if bottom is not None:
            # Create bottom
            self._mapping = ChainMap(bottom)
            assert self.__class__._main_storage is None
            self.__class__._main_storage = self
        else:
            # Retrieve stack from main thread and perform a deep copy
            assert self.__class__._main_storage is not None
            self._mapping = ChainMap(*[
                dict(mapping)
                for mapping in self._main_storage._mapping.maps
            ])

    def push(self, mapping):
        self._mapping = self._mapping.new_child(mapping)

    def remove_top(self):
        assert len(self._mapping.parents.maps) > 0
        self._mapping = self._mapping.parents

    def __getitem__(self, k):
        return self._mapping[k]

class _Storage(threading.local):
    """Thread local storage for the GlobalMapStack instance"""
    def __init__(self):
        if _GlobalMapStack._main_storage is None:
            self._mapstack = _GlobalMapStack({
                k: v.sanitize(v.bottom_value)
                for k, v in _OPTIONS.items()
            })
        else:
            self._mapstack = _GlobalMapStack()
        threading.local.__init__(self)

_LOCAL = _Storage()

# Env update ************************************************************************************ **
class Env(object):
    """Context manager to update rastersession's states. Can also be used as a decorator.

    The states are thread-local. A thread starts with a copy of the values of the first thread
    that imported rastersession (usually the main thread), taken when the thread first reads them.

    Parameters
    ----------
    check_window_bounds: bool
        Whether `Session.read_window` checks that a window lies inside the raster before calling
        gdal. When False, gdal performs the check, the same `WindowOutOfBoundsError` is raised.
        Initialized to `True`
    allowed_drivers: None or sequence of str
        Default value of the `drivers` parameter of `rastersession.open`. gdal short names.
        Initialized to `None` (all drivers allowed)
    open_options: sequence of str
        Default value of the `options` parameter of `rastersession.open`. `KEY=VALUE` strings.
        Initialized to `()`

    Examples
    --------
    >>> import rastersession
    >>> with rastersession.Env(allowed_drivers=['GTiff']):
    ...     session = rastersession.open('path/to/dem.tif')
    ...     print(session.driver_name)
    GTiff

    >>> @rastersession.Env(check_window_bounds=False)
    ... def main():
    ...     session.read_window(1, -1, -1, 10, 10) # gdal reports the error

    """

    def __init__(self, **kwargs):
        self._mapping = {}
        for k, v in kwargs.items():
            if k not in _OPTIONS:
                raise ValueError('Unknown env key `{}`'.format(k))
            v = _OPTIONS[k].sanitize(v)
            self._mapping[k] = v

    def __enter__(self):
        _LOCAL._mapstack.push(self._mapping)

    def __exit__(self, exc_type=None, exc_val=None, exc_tb=None):
        _LOCAL._mapstack.remove_top()

    def __call__(self, fn):
        if not callable(fn): # pragma: no cover
            raise ValueError("An Env instance can only be called to decorate a function.")
        @functools.wraps(fn)
        def f(*args, **kwargs):
            with self:
                return fn(*args, **kwargs)
        return f

# Value retrieval ******************************************************************************* **
class _ThreadMapStackGetter(object):
    """Getter for env attribute"""
    def __init__(self, key):
        self.key = key

    def __call__(self, current_env_self):
        return _LOCAL._mapstack[self.key]

class _CurrentEnv(Singleton):
    """Namespace to access current values of rastersession's environment variable (see
    rastersession.Env)

    Example
    -------
    >>> rastersession.env.check_window_bounds
    True

    """
    pass

for k in _OPTIONS.keys():
    setattr(_CurrentEnv, k, property(_ThreadMapStackGetter(k)))

env = _CurrentEnv() # pylint: disable=invalid-name
