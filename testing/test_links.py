import base64
import json
import logging

import pytest

from curvascope import links
from curvascope.params import RenderParams
from curvascope import DecodeError

BASE_URL = "https://curvascope.example/"

@pytest.fixture
def params():
    return (RenderParams.default()
            .with_tiling(4, 6)
            .with_model(2)
            .with_color(7)
            .with_toggles(edges=False, parity=True, solid_color=True)
            .with_iterations(80)
            .with_pointer((0.2, 0.1)))

def encode(data):
    return base64.b64encode(json.dumps(data).encode()).decode()

def test_encode_link(params):
    url = links.encode_link(params, BASE_URL)
    base, _, payload = url.partition("#")

    assert base == BASE_URL
    assert json.loads(base64.b64decode(payload)) == {
        "modelIdx": 2, "doEdges": False, "doParity": True,
        "doSolidColor": True, "colIdx": 7, "pValue": 4, "qValue": 6
    }

def test_shared_subset_survives(params):
    url = links.encode_link(params, BASE_URL)
    loaded = links.load_link(RenderParams.default(), url)

    for field in ("p", "q", "model_index", "color_index", "edges",
                  "parity", "solid_color"):
        assert getattr(loaded, field) == getattr(params, field)

    # everything else keeps its current value
    assert loaded.n_iterations == RenderParams.default().n_iterations
    assert loaded.inversion_radius == params.inversion_radius

def test_partial_payload():
    current = RenderParams.default().with_tiling(7, 3)
    loaded = links.load_link(current, BASE_URL + "#" + encode({"qValue": 4}))

    assert (loaded.p, loaded.q) == (7, 4)
    assert loaded.inversion_center == \
        RenderParams.default().with_tiling(7, 4).inversion_center

def test_no_payload(params):
    assert links.load_link(params, BASE_URL) is params
    assert links.load_link(params, BASE_URL + "#") is params

@pytest.mark.parametrize("payload", [
    "not base64!!",
    base64.b64encode(b"{not json").decode(),
    base64.b64encode(b"\xff\xfe").decode(),
    encode([1, 2, 3]),
    encode({"pValue": 4, "qValue": 4}),
    encode({"pValue": "5"}),
    encode({"doEdges": 1}),
    encode({"colIdx": True}),
    encode({"modelIdx": 17}),
    encode({"colIdx": 1000}),
    encode({"evil": 1}),
    encode({"pValue": 10 ** 400}),
])
def test_malformed_payload(params, payload, caplog):
    with pytest.raises(DecodeError):
        links.merge(params, links.decode_payload(payload))

    with caplog.at_level(logging.ERROR, logger="curvascope.links"):
        loaded = links.load_link(params, BASE_URL + "#" + payload)

    assert loaded is params
    assert tuple(loaded) == tuple(params)
    assert "ignoring shared link" in caplog.text
