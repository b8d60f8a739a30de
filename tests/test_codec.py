import polyline
import pytest

from route_picker.codec import decode_polyline
from route_picker.errors import DecodeError
from route_picker.geo import Point

# Reference vector from Google's encoded polyline algorithm documentation
GOOGLE_SAMPLE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
GOOGLE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


def test_decodes_reference_vector():
    points = decode_polyline(GOOGLE_SAMPLE)
    assert len(points) == 3
    for got, (lat, lon) in zip(points, GOOGLE_POINTS):
        assert isinstance(got, Point)
        assert got.lat == pytest.approx(lat, abs=1e-9)
        assert got.lon == pytest.approx(lon, abs=1e-9)


def test_inverse_of_reference_encoder():
    route = [(40.71280, -74.00600), (40.71301, -74.00552), (40.71455, -74.00412), (40.71280, -74.00600)]
    points = decode_polyline(polyline.encode(route))
    assert [(round(p.lat, 5), round(p.lon, 5)) for p in points] == route


def test_empty_string():
    assert decode_polyline("") == []


@pytest.mark.parametrize("bad", [
    GOOGLE_SAMPLE[:-1],  # last longitude chunk never terminates
    "_p~iF",  # latitude without longitude
    "_p~iF~ps|U_",
])
def test_truncated_input(bad):
    with pytest.raises(DecodeError):
        decode_polyline(bad)


@pytest.mark.parametrize("bad", ["_p~iF ~ps|U", "abc\n", "é??"])
def test_invalid_characters(bad):
    with pytest.raises(DecodeError):
        decode_polyline(bad)


def test_non_string():
    with pytest.raises(DecodeError):
        decode_polyline(None)
