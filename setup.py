import os

from setuptools import setup, find_packages

# Requirements
# https://caremad.io/posts/2013/07/setup-vs-requirement/
reqs = [
    'gdal>=3.1.0',
    'affine>=2.0.0',
    'numpy>=1.15',
]

extras = {
    'test': ['pytest>=5.0'],
}

readme_path = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    'README.md'
)
readme = open(readme_path, 'rb').read().decode("UTF-8")

# Classifiers
# https://pypi.python.org/pypi?%3Aaction=list_classifiers
classifiers = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Intended Audience :: Information Technology',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: Apache Software License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Topic :: Scientific/Engineering :: GIS',
]

setup(
    name='rastersession',
    version='0.1.0',
    license='Apache License 2.0',
    description='Concurrent-safe read access to raster files through GDAL',
    long_description=readme,
    long_description_content_type='text/markdown',
    classifiers=classifiers,
    keywords=['gdal gis raster tif thread'],
    packages=find_packages(),
    install_requires=reqs,
    extras_require=extras,
    python_requires='>=3.6',
)
