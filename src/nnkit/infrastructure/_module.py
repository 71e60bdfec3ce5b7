"""
Infrastructure module base class.

This module provides the abstract `Module` that concrete layers derive from.
It satisfies the domain protocols `IModule` and `ISerializable` and owns:

- an ordered, positionally addressed parameter list
- the training / evaluation mode flag and its fan-out to parameters
- gradient clearing over all owned parameters
- `__call__` forwarding to `forward` for ergonomic invocation
- the base entries of the field-list serialization contract

Subclasses must implement `forward` and `pretty_string`. They reach their
parameters only through `parameters()`, `parameter()` and `set_parameter()`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, List, Optional, Sequence, Tuple

from ..domain._errors import ParameterIndexError, SerializationError
from ..domain._module import IModule
from ..domain._serializable import ISerializable
from ..domain._variable import IVariable

logger = logging.getLogger(__name__)

_BASE_FIELDS = ("params", "train")


def _check_variable(value: Any) -> IVariable:
    if not isinstance(value, IVariable):
        raise TypeError(
            f"Module parameters must implement IVariable, got {type(value).__name__}."
        )
    return value


class Module(ABC, IModule, ISerializable):
    """
    Abstract base class for computation units.

    Parameters
    ----------
    params : Optional[Iterable[IVariable]]
        Initial parameters in their positional order. The sequence is copied,
        so later changes to the caller's container do not affect the module.
        Defaults to no parameters.

    Notes
    -----
    - The parameter list never grows or shrinks after construction; entries
      are only replaced in place via `set_parameter`.
    - Modules start in training mode. Construction does not touch the
      parameters' `requires_grad` flags; only `train()` / `eval()` do.
    - Negative positions are rejected rather than wrapped around.
    """

    def __init__(self, params: Optional[Iterable[IVariable]] = None) -> None:
        self._params: List[IVariable] = (
            [] if params is None else [_check_variable(p) for p in params]
        )
        self._train: bool = True

    # ------------------------------------------------------------------
    # Mode state
    # ------------------------------------------------------------------
    @property
    def is_training(self) -> bool:
        """
        True in training mode, False in evaluation mode.
        """
        return self._train

    def train(self) -> None:
        """
        Switch to training mode and enable gradient tracking on every parameter.
        """
        self._set_mode(True)

    def eval(self) -> None:
        """
        Switch to evaluation mode and disable gradient tracking on every parameter.
        """
        self._set_mode(False)

    def _set_mode(self, training: bool) -> None:
        self._train = training
        for p in self._params:
            p.requires_grad = training
        logger.debug(
            "%s -> %s mode (%d parameter(s))",
            type(self).__name__,
            "train" if training else "eval",
            len(self._params),
        )

    # ------------------------------------------------------------------
    # Parameter access
    # ------------------------------------------------------------------
    def parameters(self) -> List[IVariable]:
        """
        Return the owned parameters in positional order.

        Returns
        -------
        List[IVariable]
            A new list holding the same variable objects. Reordering or
            resizing it has no effect on the module.
        """
        return list(self._params)

    def num_parameters(self) -> int:
        """
        Return the number of owned parameters.
        """
        return len(self._params)

    def _check_position(self, position: int) -> int:
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(
                f"Parameter position must be an int, got {type(position).__name__}."
            )
        if not 0 <= position < len(self._params):
            raise ParameterIndexError(position, len(self._params))
        return position

    def parameter(self, position: int) -> IVariable:
        """
        Return the parameter at `position`.

        Raises
        ------
        ParameterIndexError
            If `position` is negative or not smaller than the parameter count.
        """
        return self._params[self._check_position(position)]

    def set_parameter(self, var: IVariable, position: int) -> None:
        """
        Replace the parameter at `position` with `var`.

        Subclasses may override this to react to replacement (e.g. refresh
        cached shapes) and should call the base implementation to perform
        the actual swap.

        Raises
        ------
        ParameterIndexError
            If `position` is out of range. The parameter list is unchanged.
        TypeError
            If `var` does not implement `IVariable`.
        """
        position = self._check_position(position)
        self._params[position] = _check_variable(var)
        logger.debug("%s: replaced parameter %d", type(self).__name__, position)

    def zero_grad(self) -> None:
        """
        Clear gradient references on every parameter.

        Values and `requires_grad` flags are left untouched.
        """
        for p in self._params:
            p.zero_grad()

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------
    @abstractmethod
    def forward(self, x: IVariable) -> IVariable:
        """
        Execute the forward computation of the module.
        """
        raise NotImplementedError

    def __call__(self, x: IVariable) -> IVariable:
        return self.forward(x)

    @abstractmethod
    def pretty_string(self) -> str:
        """
        Return a deterministic, human-readable label for the module.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.pretty_string()

    # ------------------------------------------------------------------
    # Serialization hooks
    # ------------------------------------------------------------------
    def serialization_fields(self) -> List[Tuple[str, Any]]:
        """
        Return the ordered fields persisted for this module.

        The base contributes ``params`` then ``train``. Subclasses append
        their own state::

            def serialization_fields(self):
                return super().serialization_fields() + [("p", self.p)]
        """
        return [("params", self.parameters()), ("train", self._train)]

    def load_serialization_fields(self, fields: Sequence[Tuple[str, Any]]) -> None:
        """
        Restore state from fields produced by `serialization_fields()`.

        The first two entries must be ``params`` and ``train``. Every later
        entry is passed to `restore_field` in order. If any step fails, the
        module's attributes are restored to their state before the call.

        Raises
        ------
        SerializationError
            If the base fields are missing, out of order, or of the wrong type.
        """
        fields = list(fields)
        names = tuple(name for name, _ in fields[: len(_BASE_FIELDS)])
        if names != _BASE_FIELDS:
            raise SerializationError(
                f"{type(self).__name__}: expected leading fields {list(_BASE_FIELDS)}, "
                f"got {list(names)}"
            )

        params = fields[0][1]
        if not isinstance(params, (list, tuple)):
            raise SerializationError(
                f"{type(self).__name__}: 'params' must be a sequence, "
                f"got {type(params).__name__}"
            )
        try:
            restored = [_check_variable(p) for p in params]
        except TypeError as exc:
            raise SerializationError(str(exc)) from exc

        train = fields[1][1]
        if not isinstance(train, bool):
            raise SerializationError(
                f"{type(self).__name__}: 'train' must be a bool, got {type(train).__name__}"
            )

        # Roll back to the pre-load attributes if any subclass field is rejected.
        saved = dict(self.__dict__)
        try:
            self._params = restored
            self._train = train
            for name, value in fields[len(_BASE_FIELDS) :]:
                self.restore_field(name, value)
        except Exception:
            self.__dict__.clear()
            self.__dict__.update(saved)
            raise

    def restore_field(self, name: str, value: Any) -> None:
        """
        Restore one subclass field. Defaults to plain attribute assignment.
        """
        setattr(self, name, value)
