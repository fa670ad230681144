""">>> help(GeoTransform)"""

import collections
import math
import numbers

import affine

from rastersession._errors import MalformedTransformError

_FIELDS = ('origin_x', 'pixel_width', 'skew_x', 'origin_y', 'skew_y', 'pixel_height')

class GeoTransform(collections.namedtuple('GeoTransform', _FIELDS)):
    """Named version of gdal's 6 affine coefficients.

    The geo transform maps the pixel coordinate (col, row) to the geo coordinate (x, y)
    >>> x = origin_x + col * pixel_width + row * skew_x
    >>> y = origin_y + col * skew_y + row * pixel_height

    (col, row) = (0, 0) is the top left corner of the top left pixel, (0.5, 0.5) is its center.

    Example
    -------
    >>> gt = GeoTransform.from_gdal([100., 10., 0., 500., 0., -10.])
    >>> gt.pixel_to_geo(3, 2)
    (130.0, 480.0)
    >>> gt.geo_to_pixel(130, 480)
    (3.0, 2.0)

    """

    __slots__ = ()

    @classmethod
    def from_gdal(cls, coefficients):
        """Build a GeoTransform from the sequence returned by `gdal.Dataset.GetGeoTransform`.

        Raises
        ------
        MalformedTransformError
            If `coefficients` is not made of exactly 6 numbers
        """
        if coefficients is None:
            raise MalformedTransformError('Expecting 6 geo transform coefficients, found None')
        try:
            coefficients = list(coefficients)
        except TypeError:
            raise MalformedTransformError(
                'Expecting 6 geo transform coefficients, found a `{}`'.format(type(coefficients))
            )
        if len(coefficients) != 6:
            raise MalformedTransformError(
                'Expecting 6 geo transform coefficients, found {}'.format(len(coefficients))
            )
        for v in coefficients:
            if isinstance(v, bool) or not isinstance(v, numbers.Real):
                raise MalformedTransformError(
                    'Expecting floating point geo transform coefficients, found `{!r}`'.format(v)
                )
        return cls(*[float(v) for v in coefficients])

    def to_gdal(self):
        """Coefficients in the order expected by `gdal.Dataset.SetGeoTransform`"""
        return tuple(self)

    @property
    def affine(self):
        """The `affine.Affine` equivalent of this geo transform"""
        return affine.Affine.from_gdal(*self)

    @property
    def is_finite(self):
        """Are all 6 coefficients finite"""
        return all(math.isfinite(v) for v in self)

    def pixel_to_geo(self, col, row):
        """Convert a pixel coordinate to a geo coordinate"""
        x = self.origin_x + col * self.pixel_width + row * self.skew_x
        y = self.origin_y + col * self.skew_y + row * self.pixel_height
        return x, y

    def geo_to_pixel(self, x, y):
        """Convert a geo coordinate to a (fractional) pixel coordinate

        Raises
        ------
        MalformedTransformError
            If the geo transform cannot be inverted
        """
        try:
            inv = ~self.affine
        except affine.TransformNotInvertibleError as e:
            raise MalformedTransformError('Geo transform {} cannot be inverted ({})'.format(
                self.to_gdal(), e
            ))
        col, row = inv * (x, y)
        return col, row
