import numpy as np
import pytest
from osgeo import gdal

import rastersession as rs

@pytest.mark.parametrize('gdt,datatype,width', [
    (gdal.GDT_Byte, rs.DataType.uint8, 1),
    (gdal.GDT_Int16, rs.DataType.int16, 2),
    (gdal.GDT_UInt16, rs.DataType.uint16, 2),
    (gdal.GDT_Int32, rs.DataType.int32, 4),
    (gdal.GDT_UInt32, rs.DataType.uint32, 4),
    (gdal.GDT_Float32, rs.DataType.float32, 4),
    (gdal.GDT_Float64, rs.DataType.float64, 8),
])
def test_known(gdt, datatype, width):
    assert rs.datatype_of_gdt(gdt) is datatype
    assert datatype.byte_width == width
    assert rs.byte_width(datatype) == width
    assert rs.byte_width(datatype.value) == width
    assert datatype.dtype == np.dtype(datatype.value)
    assert datatype.dtype.itemsize == width
    assert datatype.gdt == gdt

@pytest.mark.parametrize('gdt', [
    gdal.GDT_Unknown, gdal.GDT_CInt16, gdal.GDT_CInt32, gdal.GDT_CFloat32, gdal.GDT_CFloat64, 1000,
])
def test_unknown(gdt):
    assert rs.datatype_of_gdt(gdt) is rs.DataType.unknown
    assert rs.DataType.unknown.byte_width is None
    assert rs.byte_width('unknown') is None
    assert rs.DataType.unknown.dtype is None
    with pytest.raises(ValueError):
        rs.DataType.unknown.gdt

def test_str():
    assert str(rs.DataType.float32) == 'float32'
    assert rs.DataType('uint16') is rs.DataType.uint16
    with pytest.raises(ValueError):
        rs.byte_width('complex64')
