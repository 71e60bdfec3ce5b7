from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type

from ...domain._errors import SerializationError, UnknownModuleTypeError
from .._module import Module
from ._serialization_values import decode_value, encode_value

logger = logging.getLogger(__name__)

_MODULE_REGISTRY: Dict[str, Type[Module]] = {}


def register_module(name: Optional[str] = None) -> Callable[[Type[Module]], Type[Module]]:
    """
    Decorator to register a Module class for deserialization by type name.
    """

    def deco(cls: Type[Module]) -> Type[Module]:
        key = name or cls.__name__
        _MODULE_REGISTRY[key] = cls
        cls._registered_name = key  # type: ignore[attr-defined]
        return cls

    return deco


def registered_type(type_name: str) -> Type[Module]:
    """
    Look up a registered Module class by name.
    """
    try:
        return _MODULE_REGISTRY[type_name]
    except KeyError:
        raise UnknownModuleTypeError(type_name) from None


def _type_name(m: Module) -> str:
    cls = type(m)
    # Only trust a name registered for this exact class, not one inherited.
    return cls.__dict__.get("_registered_name", cls.__name__)


def module_to_payload(m: Module) -> Dict[str, Any]:
    """
    Encode a Module's serialization fields.

    Payload format
    --------------
    {
      "type": "Affine",
      "fields": [["params", <node>], ["train", true], ["scale", 2.0]]
    }

    Fields are stored as a list of pairs so their declared order survives
    JSON round-trips.
    """
    fields = [[str(name), encode_value(value)] for name, value in m.serialization_fields()]
    return {"type": _type_name(m), "fields": fields}


def _decode_fields(payload: Dict[str, Any]) -> list[tuple[str, Any]]:
    raw = payload.get("fields")
    if not isinstance(raw, list):
        raise SerializationError("Payload 'fields' must be a list of [name, value] pairs.")
    out: list[tuple[str, Any]] = []
    for entry in raw:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise SerializationError(f"Malformed field entry: {entry!r}")
        out.append((str(entry[0]), decode_value(entry[1])))
    return out


def load_module_payload_(m: Module, payload: Dict[str, Any]) -> None:
    """
    In-place load of a payload into an existing module.

    The payload must name the module's own type and list exactly the field
    names `m.serialization_fields()` declares, in the same order. All
    values are decoded before the module is touched.

    Raises
    ------
    SerializationError
        On type mismatch, layout mismatch, or undecodable values.
    """
    type_name = str(payload.get("type"))
    if type_name != _type_name(m):
        raise SerializationError(
            f"Payload holds a '{type_name}', cannot load into '{_type_name(m)}'."
        )

    fields = _decode_fields(payload)
    expected = [name for name, _ in m.serialization_fields()]
    got = [name for name, _ in fields]
    if got != expected:
        raise SerializationError(
            f"Field layout mismatch for '{type_name}': expected {expected}, got {got}"
        )

    m.load_serialization_fields(fields)
    logger.debug("Loaded %s (%d field(s))", type_name, len(fields))


def module_from_payload(payload: Dict[str, Any]) -> Module:
    """
    Rebuild a registered Module from a payload.

    The registered class is instantiated with no arguments, then loaded via
    `load_module_payload_`.

    Raises
    ------
    UnknownModuleTypeError
        If the payload's type name was never registered.
    SerializationError
        If the class cannot be constructed without arguments.
    """
    cls = registered_type(str(payload.get("type")))
    try:
        m = cls()
    except TypeError as exc:
        raise SerializationError(
            f"{cls.__name__} must be constructible without arguments to be loaded: {exc}"
        ) from exc
    load_module_payload_(m, payload)
    return m
