"""Conversions between gdal GDTs, datatype tags and numpy dtypes

Only the GDTs with a portable tag are listed. The GDTs introduced by newer gdal versions (Int8,
Int64, UInt64, Float16, ...) and the complex GDTs are all reported as `unknown`.
"""

from osgeo import gdal
import numpy as np

UNKNOWN_TAG = 'unknown'

# GDT -> TAG CONVERSIONS ************ **
_TAG_OF_GDT = {
    gdal.GDT_Byte: 'uint8',
    gdal.GDT_Int16: 'int16',
    gdal.GDT_UInt16: 'uint16',
    gdal.GDT_Int32: 'int32',
    gdal.GDT_UInt32: 'uint32',
    gdal.GDT_Float32: 'float32',
    gdal.GDT_Float64: 'float64',
}

# TAG -> GDT CONVERSIONS ************ **
_GDT_OF_TAG = {v: k for (k, v) in _TAG_OF_GDT.items()}

# TAG -> DTYPE CONVERSIONS ********** **
_DTYPE_OF_TAG = {
    tag: np.dtype(tag)
    for tag in _GDT_OF_TAG
}

TAGS = tuple(_GDT_OF_TAG.keys()) + (UNKNOWN_TAG,)

# STRINGIFICATION ******************* **
def str_of_gdt(gdt):
    """Name of a GDT as reported by gdal, works with GDTs unknown to this module"""
    name = gdal.GetDataTypeName(int(gdt))
    if name is None:
        return 'GDT_{}'.format(gdt)
    return 'GDT_{}'.format(name)

# PUBLIC **************************** **
def tag_of_gdt(gdt):
    """
    Convert a GDT (GDAL type) to a datatype tag.
    Unrecognized GDTs are converted to `unknown`, no exception is raised.
    """
    return _TAG_OF_GDT.get(gdt, UNKNOWN_TAG)

def gdt_of_tag(tag):
    """
    Convert a datatype tag to a GDT (GDAL type).
    If impossible an exception is raised.
    """
    gdt = _GDT_OF_TAG.get(tag)
    if gdt is None:
        raise ValueError('`%s` has no equivalent gdt' % tag)
    return gdt

def dtype_of_tag(tag):
    """
    Convert a datatype tag to a numpy dtype in native byte order.
    Returns None for `unknown`.
    """
    if tag not in TAGS:
        raise ValueError('`%s` is not a datatype tag' % tag)
    return _DTYPE_OF_TAG.get(tag)

def byte_width_of_tag(tag):
    """
    Size in bytes of one pixel of a datatype tag.
    Returns None for `unknown`.
    """
    dtype = dtype_of_tag(tag)
    if dtype is None:
        return None
    return dtype.itemsize
