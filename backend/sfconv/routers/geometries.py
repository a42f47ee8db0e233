from sfconv.core.errors import GeometryCodecError
from sfconv.core.models import from_shapely
from sfconv.core.vector import GeometryHandle, determine_collection_kind, vector_class
from sfconv.parsers.vector import nodes_to_vector
from sfconv.schemas import requests, responses
from sfconv.schemas.nodes import node_to_model
from sfconv.serializers.vector import geometries_to_nodes
from fastapi import APIRouter, HTTPException, status
from shapely.errors import ShapelyError
from shapely.geometry import shape
from typing import Any


api_router = APIRouter(prefix='')


def _get_element_properties(index: int, handle: GeometryHandle | None) -> dict[str, Any]:
    return {
        'index': index,
        'kind': None if handle is None else handle.kind,
    }


@api_router.post('/to_geojson')
async def nodes_to_geojson(node_vector: requests.NodeVector) -> responses.VectorFeatureCollection:
    nodes = [node.to_node() for node in node_vector.nodes]
    try:
        conversion = nodes_to_vector(nodes, node_vector.on_error)
    except GeometryCodecError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    features = []
    for i, handle in enumerate(conversion.vector):
        features.append(responses.Feature(
            type='Feature',
            geometry=None if handle is None else handle.geometry.__geo_interface__,
            properties=_get_element_properties(i, handle),
        ))

    return responses.VectorFeatureCollection(
        type='FeatureCollection',
        features=features,
        vector_class=list(conversion.vector.classes),
        failures=[
            responses.ElementFailure(
                index=failure.index,
                error=type(failure.error).__name__,
                message=failure.message,
            )
            for failure in conversion.failures
        ],
    )


@api_router.post('/from_geojson')
async def geojson_to_nodes(payload: requests.GeoJSONGeometries) -> responses.NodeList:
    geometries = []
    for i, geojson in enumerate(payload.geometries):
        if geojson is None:
            geometries.append(None)
            continue
        try:
            geometries.append(from_shapely(shape(geojson.model_dump())))
        except (ShapelyError, ValueError) as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f'element {i}: {e}')

    nodes = geometries_to_nodes(geometries)
    return responses.NodeList(
        nodes=[node_to_model(node) for node in nodes],
        vector_class=list(vector_class(determine_collection_kind(geometries))),
    )
