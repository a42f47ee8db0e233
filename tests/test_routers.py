import pytest
from fastapi.testclient import TestClient

from sfconv.main import app


@pytest.fixture
def client():
    return TestClient(app)


LINESTRING = {
    'kind': 'matrix',
    'classes': ['XY', 'LINESTRING', 'sfg'],
    'values': [0, 1, 2, 10, 11, 12],
    'dim': [3, 2],
}
SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]


def test_to_geojson(client):
    response = client.post('/geometries/to_geojson', json={'nodes': [LINESTRING, {'kind': 'null'}]})
    assert response.status_code == 200

    body = response.json()
    assert body['type'] == 'FeatureCollection'
    assert body['vector_class'] == ['sfconv_linestring', 'sfconv', 'list']
    assert body['failures'] == []
    assert body['features'][0]['geometry'] == {
        'type': 'LineString',
        'coordinates': [[0.0, 10.0], [1.0, 11.0], [2.0, 12.0]],
    }
    assert body['features'][0]['properties'] == {'index': 0, 'kind': 'linestring'}
    assert body['features'][1]['geometry'] is None


def test_to_geojson_polygon_from_nested_lists(client):
    polygon = {
        'kind': 'list',
        'classes': ['XY', 'POLYGON', 'sfg'],
        'children': [{
            'kind': 'matrix',
            'classes': ['XY', 'LINESTRING', 'sfg'],
            'values': [0, 10, 10, 0, 0, 0, 0, 10, 10, 0],
            'dim': [5, 2],
        }],
    }
    response = client.post('/geometries/to_geojson', json={'nodes': [polygon]})
    assert response.status_code == 200
    assert response.json()['features'][0]['geometry'] == {'type': 'Polygon', 'coordinates': [SQUARE]}


def test_to_geojson_reports_failures(client):
    bad = dict(LINESTRING, dim=[2, 3])
    response = client.post('/geometries/to_geojson', json={'nodes': [LINESTRING, bad]})
    assert response.status_code == 200

    body = response.json()
    assert body['features'][1]['geometry'] is None
    assert body['failures'][0]['index'] == 1
    assert body['failures'][0]['error'] == 'ShapeError'
    assert body['vector_class'][0] == 'sfconv_linestring'


def test_to_geojson_raise_policy(client):
    empty_polygon = {'kind': 'list', 'classes': ['XY', 'POLYGON', 'sfg'], 'children': []}
    response = client.post('/geometries/to_geojson', json={'nodes': [empty_polygon], 'on_error': 'raise'})
    assert response.status_code == 422
    assert 'element 0' in response.json()['detail']


def test_from_geojson(client):
    payload = {'geometries': [
        {'type': 'Polygon', 'coordinates': [SQUARE]},
        None,
        {'type': 'GeometryCollection', 'geometries': [{'type': 'Point', 'coordinates': [0, 0]}]},
        {'type': 'MultiPolygon', 'coordinates': []},
    ]}
    response = client.post('/geometries/from_geojson', json=payload)
    assert response.status_code == 200

    body = response.json()
    polygon, null, collection, multipolygon = body['nodes']
    assert polygon['kind'] == 'list'
    assert polygon['classes'] == ['XY', 'POLYGON', 'sfg']
    assert len(polygon['children']) == 1
    assert polygon['children'][0]['dim'] == [5, 2]
    assert polygon['children'][0]['values'] == [0, 10, 10, 0, 0, 0, 0, 10, 10, 0]
    assert null == {'kind': 'null'}
    assert collection == {'kind': 'null'}
    assert multipolygon['children'] == []
    assert body['vector_class'][0] == 'sfconv_geometrycollection'


def test_from_geojson_points_only(client):
    payload = {'geometries': [{'type': 'Point', 'coordinates': [1, 2]}, {'type': 'Point', 'coordinates': [3, 4]}]}
    body = client.post('/geometries/from_geojson', json=payload).json()
    assert body['vector_class'] == ['sfconv_point', 'sfconv', 'list']
    assert body['nodes'][1] == {'kind': 'matrix', 'classes': ['XY', 'POINT', 'sfg'], 'values': [3.0, 4.0], 'dim': [1, 2]}


def test_from_geojson_drops_empty_members(client):
    payload = {'geometries': [
        {'type': 'MultiLineString', 'coordinates': [[]]},
        {'type': 'MultiPolygon', 'coordinates': [[[]]]},
    ]}
    body = client.post('/geometries/from_geojson', json=payload).json()
    multilinestring, multipolygon = body['nodes']
    assert multilinestring['classes'] == ['XY', 'MULTILINESTRING', 'sfg']
    assert multilinestring['children'] == []
    assert multipolygon['classes'] == ['XY', 'MULTIPOLYGON', 'sfg']
    assert multipolygon['children'] == []
