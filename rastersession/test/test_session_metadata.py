# pylint: disable=redefined-outer-name

import pytest
from osgeo import gdal

import rastersession as rs
from rastersession.test.tools import make_tif

@pytest.fixture(scope='module')
def path(tmp_path_factory):
    return make_tif(
        tmp_path_factory.mktemp('metadata') / 'test.tif',
        rsize=(8, 6), band_count=3, gdt=gdal.GDT_UInt16, nodata=65535,
        descriptions=['red', 'green', ''],
        metadata={
            '': {'AUTHOR': 'rastersession', 'CAMPAIGN': '2018'},
            'PROCESSING': {'STEP1': 'orthorectification', 'STEP2': 'mosaic'},
        },
    )

@pytest.fixture(scope='module')
def session(path):
    with rs.open(path) as session:
        yield session

def test_metadata_item(session):
    assert session.metadata_item('AUTHOR') == 'rastersession'
    assert session.metadata_item('CAMPAIGN', '') == '2018'
    assert session.metadata_item('STEP2', 'PROCESSING') == 'mosaic'
    assert session.metadata_item('AUTHOR', 'PROCESSING') is None

def test_missing_key(session):
    assert session.metadata_item('NONEXISTENT_KEY') is None
    assert session.metadata_item('NONEXISTENT_KEY', 'PROCESSING') is None

def test_missing_domain(session):
    with pytest.raises(rs.NoSuchDomainError) as e:
        session.metadata_item('AUTHOR', 'NONEXISTENT_DOMAIN')
    assert e.value.kind is rs.ErrorKind.no_such_domain
    assert session.metadata_domain('NONEXISTENT_DOMAIN') is None

def test_domains(session):
    domains = session.metadata_domains()
    assert domains[0] == ''
    assert 'PROCESSING' in domains
    assert 'IMAGE_STRUCTURE' in domains
    assert len(domains) == len(set(domains))

def test_domain(session):
    default = session.metadata_domain()
    assert 'AUTHOR=rastersession' in default
    assert 'CAMPAIGN=2018' in default
    assert session.metadata_domain('') == default
    assert sorted(session.metadata_domain('PROCESSING')) == [
        'STEP1=orthorectification', 'STEP2=mosaic',
    ]
    for domain in session.metadata_domains():
        assert isinstance(session.metadata_domain(domain), list)

def test_metadata_types(session):
    with pytest.raises(TypeError):
        session.metadata_item(42)
    with pytest.raises(TypeError):
        session.metadata_item('AUTHOR', None)
    with pytest.raises(TypeError):
        session.metadata_domain(None)

def test_band_descriptions(session):
    assert session.band_description(1) == 'red'
    assert session.band_description(2) == 'green'
    assert session.band_description(3) == ''
    assert session.band_descriptions() == ['red', 'green', '']

def test_no_data_value(session, tmp_path):
    assert session.no_data_value(1) == 65535.
    assert isinstance(session.no_data_value(3), float)

    path = make_tif(tmp_path / 'no_nodata.tif', rsize=(2, 2))
    with rs.open(path) as other:
        assert other.no_data_value(1) is None
