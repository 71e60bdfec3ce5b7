from ._errors import (
    CheckpointFormatError,
    ParameterIndexError,
    SerializationError,
    UnknownModuleTypeError,
)
from ._module import IModule
from ._serializable import ISerializable
from ._variable import IVariable

__all__ = [
    "IVariable",
    "IModule",
    "ISerializable",
    "ParameterIndexError",
    "SerializationError",
    "UnknownModuleTypeError",
    "CheckpointFormatError",
]
