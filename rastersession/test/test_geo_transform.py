import affine
import numpy as np
import pytest

import rastersession as rs

def test_fields():
    gt = rs.GeoTransform.from_gdal([100, 0.5, 0, 500, 0, -0.25])
    assert gt.origin_x == 100.
    assert gt.pixel_width == 0.5
    assert gt.skew_x == 0.
    assert gt.origin_y == 500.
    assert gt.skew_y == 0.
    assert gt.pixel_height == -0.25
    assert all(isinstance(v, float) for v in gt)
    assert gt.to_gdal() == (100., 0.5, 0., 500., 0., -0.25)
    assert gt.is_finite

def test_mapping():
    gt = rs.GeoTransform.from_gdal([100., 10., 2., 500., 3., -10.])
    assert gt.pixel_to_geo(0, 0) == (100., 500.)
    assert gt.pixel_to_geo(1, 0) == (110., 503.)
    assert gt.pixel_to_geo(0, 1) == (102., 490.)
    assert gt.pixel_to_geo(4, 5) == (100. + 40. + 10., 500. + 12. - 50.)

    for col, row in [(0, 0), (4, 5), (-3, 12.5)]:
        x, y = gt.pixel_to_geo(col, row)
        assert np.allclose(gt.geo_to_pixel(x, y), (col, row))

def test_affine():
    gt = rs.GeoTransform.from_gdal([100., 10., 0., 500., 0., -10.])
    assert gt.affine == affine.Affine(10., 0., 100., 0., -10., 500.)
    assert gt.affine * (3, 2) == gt.pixel_to_geo(3, 2)

def test_not_finite():
    gt = rs.GeoTransform.from_gdal([float('nan'), 1, 0, 0, 0, 1])
    assert not gt.is_finite

@pytest.mark.parametrize('coefficients', [
    None,
    42,
    [0, 1, 0, 0, 0],
    [0, 1, 0, 0, 0, 1, 0],
    [0, 1, 0, 0, 0, '1'],
    [0, 1, 0, 0, 0, True],
    [0, 1, 0, 0, 0, None],
])
def test_malformed(coefficients):
    with pytest.raises(rs.MalformedTransformError) as e:
        rs.GeoTransform.from_gdal(coefficients)
    assert e.value.kind is rs.ErrorKind.malformed_transform

def test_not_invertible():
    gt = rs.GeoTransform.from_gdal([0, 0, 0, 0, 0, 0])
    with pytest.raises(rs.MalformedTransformError, match='inverted'):
        gt.geo_to_pixel(1, 1)
