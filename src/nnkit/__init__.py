"""nnkit: the module abstraction of a small neural-network construction layer."""

__version__ = "0.1.0"

from .domain import (
    CheckpointFormatError,
    IModule,
    ISerializable,
    IVariable,
    ParameterIndexError,
    SerializationError,
    UnknownModuleTypeError,
)
from .infrastructure import Module, Variable
from .infrastructure.module import load_json, load_json_into, register_module, save_json

__all__ = [
    "IVariable",
    "IModule",
    "ISerializable",
    "Module",
    "Variable",
    "register_module",
    "save_json",
    "load_json",
    "load_json_into",
    "ParameterIndexError",
    "SerializationError",
    "UnknownModuleTypeError",
    "CheckpointFormatError",
]
