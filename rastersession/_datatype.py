""">>> help(DataType)"""

import enum

from rastersession._tools import conv

class DataType(enum.Enum):
    """Closed set of the portable datatype tags of a band.

    Each tag has a fixed byte width except `unknown`, that stands for all the gdal types without a
    portable equivalent (complex types, and the types introduced by recent gdal versions). The
    byte width of `unknown` is undefined and never used to size a read.

    Example
    -------
    >>> DataType.float32.byte_width
    4
    >>> DataType.unknown.byte_width is None
    True
    >>> DataType('uint16') is DataType.uint16
    True

    """
    uint8 = 'uint8'
    int16 = 'int16'
    uint16 = 'uint16'
    int32 = 'int32'
    uint32 = 'uint32'
    float32 = 'float32'
    float64 = 'float64'
    unknown = 'unknown'

    @property
    def byte_width(self):
        """Size in bytes of one pixel, None for `unknown`"""
        return conv.byte_width_of_tag(self.value)

    @property
    def gdt(self):
        """gdal datatype code, like `gdal.GDT_Float32`. Raises ValueError for `unknown`"""
        return conv.gdt_of_tag(self.value)

    @property
    def dtype(self):
        """numpy dtype in native byte order, None for `unknown`"""
        return conv.dtype_of_tag(self.value)

    def __str__(self):
        return self.value

assert set(t.value for t in DataType) == set(conv.TAGS)

def datatype_of_gdt(gdt):
    """Resolve a gdal datatype code (like `gdal.GDT_Float32`) to a DataType.
    Codes without a portable tag resolve to `DataType.unknown`.
    """
    return DataType(conv.tag_of_gdt(gdt))

def byte_width(datatype):
    """Size in bytes of one pixel of `datatype` (a DataType or its name), None for `unknown`"""
    return DataType(datatype).byte_width
