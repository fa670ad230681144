"""Private tools"""

from rastersession._tools import conv
from rastersession._tools.helper_classes import (
    GDALErrorCatcher,
    CallOrContext,
    Singleton,
)
from rastersession._tools.parameters import (
    normalize_path,
    is_vsi_path,
    path_is_readable,
    normalize_band_index,
    normalize_window,
    check_window_in_raster,
    normalize_drivers_parameter,
    normalize_open_options_parameter,
)
from rastersession._tools.error_normalization import (
    format_gdal_error,
    open_error_of_payload,
    read_error_of_payload,
)
