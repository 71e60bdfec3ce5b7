"""
Single-file JSON checkpoints for modules.

A checkpoint wraps one module payload (see `module_to_payload`) with a
format tag::

    {
      "format": "nnkit.json.ckpt.v1",
      "module": {"type": "...", "fields": [[name, node], ...]}
    }

The payload is fully built before the file is written, and a target module
is only modified after the file has been parsed and its layout validated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from ...domain._errors import CheckpointFormatError, SerializationError
from .._module import Module
from ._serialization_core import (
    load_module_payload_,
    module_from_payload,
    module_to_payload,
)

logger = logging.getLogger(__name__)

CHECKPOINT_FORMAT = "nnkit.json.ckpt.v1"


def save_json(m: Module, path: str | Path) -> None:
    """
    Save a module's serialization fields into a JSON file.

    Parameters
    ----------
    m : Module
        Module to save. Its type should be registered via `@register_module`
        if it is to be rebuilt with `load_json`.
    path : str | Path
        Output path. Parent directories are created as needed.
    """
    payload = {"format": CHECKPOINT_FORMAT, "module": module_to_payload(m)}
    text = json.dumps(payload, indent=2, sort_keys=True)

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    logger.debug("Saved %s checkpoint to %s", payload["module"]["type"], p)


def _read_checkpoint(path: str | Path) -> Dict[str, Any]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    fmt = payload.get("format") if isinstance(payload, dict) else None
    if fmt != CHECKPOINT_FORMAT:
        raise CheckpointFormatError(fmt)
    module = payload.get("module")
    if not isinstance(module, dict):
        raise SerializationError(
            f"Checkpoint {path} has no module payload (got {type(module).__name__})."
        )
    return module


def load_json(path: str | Path) -> Module:
    """
    Rebuild a registered module from a checkpoint created by `save_json()`.

    Raises
    ------
    CheckpointFormatError
        If the file's format tag is not supported.
    UnknownModuleTypeError
        If the stored type was never registered.
    """
    m = module_from_payload(_read_checkpoint(path))
    logger.debug("Loaded %s checkpoint from %s", type(m).__name__, path)
    return m


def load_json_into(m: Module, path: str | Path) -> None:
    """
    Load a checkpoint into an existing module of the same type.
    """
    load_module_payload_(m, _read_checkpoint(path))
