"""Encode render parameters in a shareable link, and read them back.

A link is a base URL, a `#`, and a base64-encoded JSON object holding
the parameters listed in `SHARED_PARAMS`:

```python
from curvascope import links
from curvascope.params import RenderParams

url = links.encode_link(RenderParams.default(), "https://example.com/")
links.load_link(RenderParams.default().with_tiling(4, 6), url).p
```
    5

Malformed payloads never change the current parameters: `load_link`
logs the problem and hands back the parameters it was given.

"""

import base64
import binascii
import json
import logging

from curvascope.base import DecodeError, ValidationError
from curvascope.models import Model

logger = logging.getLogger(__name__)

SEPARATOR = "#"

# payload key -> (RenderParams field, expected type)
SHARED_PARAMS = {
    "modelIdx": ("model_index", int),
    "doEdges": ("edges", bool),
    "doParity": ("parity", bool),
    "doSolidColor": ("solid_color", bool),
    "colIdx": ("color_index", int),
    "pValue": ("p", int),
    "qValue": ("q", int),
}


def encode_payload(params):
    """Get the base64 text encoding the shared subset of `params`."""
    data = {key: getattr(params, field)
            for key, (field, _) in SHARED_PARAMS.items()}
    text = json.dumps(data, separators=(",", ":"))
    return base64.b64encode(text.encode("utf-8")).decode("ascii")

def encode_link(params, base_url):
    return base_url + SEPARATOR + encode_payload(params)

def decode_payload(payload):
    """Decode the base64/JSON payload of a shared link.

    Returns
    -------
    dict
        mapping from `RenderParams` field names to values. Only the
        keys present in the payload are included.

    Raises
    ------
    DecodeError
        Raised if the payload is not base64-encoded JSON, is not a
        JSON object, or contains unknown keys or values of the wrong
        type.

    """
    try:
        raw = base64.b64decode(payload, validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as err:
        raise DecodeError("Incorrectly formatted link: {}".format(err)) from err

    if not isinstance(data, dict):
        raise DecodeError("Link payload must be a JSON object")

    values = {}
    for key, value in data.items():
        try:
            field, kind = SHARED_PARAMS[key]
        except KeyError:
            raise DecodeError(
                "Unknown parameter '{}' in link".format(key)
            ) from None

        # bool is a subclass of int, but we don't want to accept it here
        if (not isinstance(value, kind) or
                (kind is int and isinstance(value, bool))):
            raise DecodeError(
                "Parameter '{}' should be of type {}, got {!r}".format(
                    key, kind.__name__, value
                ))
        values[field] = value

    return values

def merge(params, values):
    """Merge decoded link values into `params`.

    Raises
    ------
    DecodeError
        Raised if the values don't describe valid parameters (e.g. a
        non-hyperbolic tiling or a model outside the catalog).

    """
    merged = params
    try:
        if "p" in values or "q" in values:
            merged = merged.with_tiling(values.get("p", params.p),
                                        values.get("q", params.q))
        if "model_index" in values:
            merged = merged.with_model(Model.from_index(values["model_index"]))
        if "color_index" in values:
            merged = merged.with_color(values["color_index"])
        merged = merged.with_toggles(edges=values.get("edges"),
                                     parity=values.get("parity"),
                                     solid_color=values.get("solid_color"))
    except (ValidationError, IndexError) as err:
        raise DecodeError("Invalid parameters in link: {}".format(err)) from err

    return merged

def load_link(params, url):
    """Apply the parameters encoded in `url` on top of `params`.

    Returns
    -------
    RenderParams
        the merged parameters, or `params` itself if the url has no
        payload or the payload could not be decoded.

    """
    _, sep, payload = url.partition(SEPARATOR)
    if not sep or not payload:
        return params

    try:
        return merge(params, decode_payload(payload))
    except DecodeError as err:
        logger.error("ignoring shared link: %s", err)
        return params
