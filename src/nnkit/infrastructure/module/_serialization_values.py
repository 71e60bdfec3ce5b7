"""
JSON-safe encoding of serialized field values.

Every value a module lists in `serialization_fields()` passes through
`encode_value` on save and `decode_value` on load. Scalars are stored as-is.
Arrays and variables become base64 payloads. Containers are tagged so their
Python type survives the trip.

Node formats
------------
- ``None``, ``bool``, ``int``, ``float``, ``str``: stored verbatim
- ndarray:  ``{"kind": "ndarray", "array": <array payload>}``
- Variable: ``{"kind": "variable", "array": <array payload>, "requires_grad": bool}``
- list / tuple: ``{"kind": "list" | "tuple", "items": [<node>, ...]}``
- dict (str keys): ``{"kind": "dict", "items": {key: <node>, ...}}``

Array payload: ``{"b64": ..., "dtype": "<f4", "shape": [...], "order": "C"}``.
Gradients are never encoded.
"""

from __future__ import annotations

import base64
from typing import Any, Dict

import numpy as np

from ...domain._errors import SerializationError
from .._variable import Variable

_SCALARS = (bool, int, float, str)


def array_to_payload(arr: np.ndarray) -> Dict[str, Any]:
    """
    Serialize a NumPy array into a JSON-safe payload.
    """
    a = np.ascontiguousarray(arr)
    if a.dtype.hasobject:
        raise SerializationError("Object arrays cannot be serialized.")
    return {
        "b64": base64.b64encode(a.tobytes(order="C")).decode("ascii"),
        "dtype": a.dtype.str,
        "shape": list(a.shape),
        "order": "C",
    }


def payload_to_array(payload: Dict[str, Any]) -> np.ndarray:
    """
    Deserialize an array payload into a new, owning NumPy array.

    Raises
    ------
    SerializationError
        If the payload is incomplete or its byte count does not match the
        declared dtype and shape.
    """
    try:
        raw = base64.b64decode(str(payload["b64"]).encode("ascii"))
        dtype = np.dtype(str(payload["dtype"]))
        shape = tuple(int(x) for x in payload["shape"])
        arr = np.frombuffer(raw, dtype=dtype).reshape(shape)
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed array payload: {exc}") from exc
    return np.array(arr, copy=True, order="C")


def encode_value(value: Any) -> Any:
    """
    Convert a field value into a JSON-safe node.

    Raises
    ------
    SerializationError
        If the value (or anything nested in it) has no encoding.
    """
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Variable):
        return {
            "kind": "variable",
            "array": array_to_payload(value.data),
            "requires_grad": value.requires_grad,
        }
    if isinstance(value, np.ndarray):
        return {"kind": "ndarray", "array": array_to_payload(value)}
    if isinstance(value, (list, tuple)):
        return {
            "kind": "tuple" if isinstance(value, tuple) else "list",
            "items": [encode_value(v) for v in value],
        }
    if isinstance(value, dict):
        bad = [k for k in value if not isinstance(k, str)]
        if bad:
            raise SerializationError(f"Dict keys must be str, got {bad[0]!r}")
        return {"kind": "dict", "items": {k: encode_value(v) for k, v in value.items()}}

    raise SerializationError(f"Cannot serialize value of type {type(value).__name__}")


def decode_value(node: Any) -> Any:
    """
    Rebuild a field value from a node produced by `encode_value`.

    Raises
    ------
    SerializationError
        If the node (or anything nested in it) is malformed.
    """
    if node is None or isinstance(node, _SCALARS):
        return node
    if not isinstance(node, dict) or "kind" not in node:
        raise SerializationError(f"Malformed value node: {node!r}")

    kind = node["kind"]
    try:
        return _decode_kind(kind, node)
    except SerializationError:
        raise
    except (KeyError, TypeError, AttributeError) as exc:
        raise SerializationError(f"Malformed '{kind}' node: {exc!r}") from exc


def _decode_kind(kind: Any, node: Dict[str, Any]) -> Any:
    if kind == "variable":
        requires_grad = node.get("requires_grad", True)
        if not isinstance(requires_grad, bool):
            raise SerializationError(
                f"Variable 'requires_grad' must be a bool, got {requires_grad!r}"
            )
        return Variable(payload_to_array(node["array"]), requires_grad=requires_grad)
    if kind == "ndarray":
        return payload_to_array(node["array"])
    if kind == "list":
        return [decode_value(v) for v in node["items"]]
    if kind == "tuple":
        return tuple(decode_value(v) for v in node["items"])
    if kind == "dict":
        return {str(k): decode_value(v) for k, v in node["items"].items()}

    raise SerializationError(f"Unknown value kind '{kind}'")
