"""Conversions between gdal constants and python representations"""

from rastersession._tools.conv._gdal_conv import *
from rastersession._tools.conv._gdal_gdt_conv import *
