from ._checkpoint import CHECKPOINT_FORMAT, load_json, load_json_into, save_json
from ._serialization_core import (
    load_module_payload_,
    module_from_payload,
    module_to_payload,
    register_module,
    registered_type,
)

__all__ = [
    "CHECKPOINT_FORMAT",
    "save_json",
    "load_json",
    "load_json_into",
    "register_module",
    "registered_type",
    "module_to_payload",
    "module_from_payload",
    "load_module_payload_",
]
