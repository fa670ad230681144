"""Conversions between gdal types python representations

http://www.gdal.org/gdal_8h.html
http://www.gdal.org/cpl__error_8h.html
"""

from osgeo import gdal

# OF (Open Flag) <-> str ************************************************************************ **
_OF_OF_STR = {
    'raster': gdal.OF_RASTER,
    'verbose_error': gdal.OF_VERBOSE_ERROR,
}

def of_of_str(str_):
    return _OF_OF_STR[str_]

_OF_OF_MODE = {
    'r': gdal.OF_READONLY,
}

def of_of_mode(mode):
    return _OF_OF_MODE[mode]

# CPLE (CPL Error number) <-> str *************************************************************** **
_STR_OF_CPLE = {
    gdal.CPLE_None: 'CPLE_None',
    gdal.CPLE_AppDefined: 'CPLE_AppDefined',
    gdal.CPLE_OutOfMemory: 'CPLE_OutOfMemory',
    gdal.CPLE_FileIO: 'CPLE_FileIO',
    gdal.CPLE_OpenFailed: 'CPLE_OpenFailed',
    gdal.CPLE_IllegalArg: 'CPLE_IllegalArg',
    gdal.CPLE_NotSupported: 'CPLE_NotSupported',
    gdal.CPLE_AssertionFailed: 'CPLE_AssertionFailed',
    gdal.CPLE_NoWriteAccess: 'CPLE_NoWriteAccess',
    gdal.CPLE_UserInterrupt: 'CPLE_UserInterrupt',
    gdal.CPLE_ObjectNull: 'CPLE_ObjectNull',
}

def str_of_cple(cple):
    return _STR_OF_CPLE.get(cple, 'CPLE_{}'.format(cple))
