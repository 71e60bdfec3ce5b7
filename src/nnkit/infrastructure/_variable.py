"""
Concrete autograd-tracked value.

This module defines `Variable`, a NumPy-backed implementation of the domain
contract `IVariable`. A `Variable` owns an array, a `requires_grad` flag and an
optional gradient reference that the autograd engine fills in.

Design notes
------------
- The array is copied on construction so a `Variable` never aliases caller
  memory.
- Arithmetic operators evaluate eagerly and return new `Variable` objects.
  They do not record a computation graph; backward mechanics live outside
  this package.
- `zero_grad()` drops the gradient reference rather than filling it with
  zeros, so "no gradient" and "zero gradient" stay distinguishable.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np

from ..domain._variable import IVariable


class Variable(IVariable):
    """
    NumPy-backed value with gradient-tracking state.

    Parameters
    ----------
    data : array-like or Variable
        Initial value. Copied into a C-contiguous NumPy array. A `Variable`
        contributes its values only, not its tracking state or gradient.
    requires_grad : bool, optional
        Whether gradients should be tracked for this value. Defaults to True.
    """

    def __init__(self, data: Any, requires_grad: bool = True) -> None:
        if isinstance(data, Variable):
            data = data.data
        self._data: np.ndarray = np.array(data, copy=True, order="C")
        self._requires_grad: bool = bool(requires_grad)
        self._grad: Optional[Variable] = None

    # ---- storage ----
    @property
    def data(self) -> np.ndarray:
        """
        Return the underlying array (not a copy).
        """
        return self._data

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the stored array.
        """
        return self._data.copy()

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Overwrite the stored values in place.

        Parameters
        ----------
        arr : array-like
            New values. Must match the current shape.

        Raises
        ------
        ValueError
            If the shape of `arr` differs from the variable's shape.
        """
        src = np.asarray(arr)
        if tuple(src.shape) != self.shape:
            raise ValueError(
                f"Shape mismatch: variable {self.shape} vs array {tuple(src.shape)}"
            )
        self._data[...] = src

    # ---- gradient tracking ----
    @property
    def requires_grad(self) -> bool:
        return self._requires_grad

    @requires_grad.setter
    def requires_grad(self, value: bool) -> None:
        self._requires_grad = bool(value)

    @property
    def grad(self) -> Optional["Variable"]:
        return self._grad

    def set_grad(self, grad: Optional["Variable"]) -> None:
        """
        Overwrite the stored gradient (used by autograd).
        """
        self._grad = grad

    def accumulate_grad(self, grad: "Variable") -> None:
        """
        Accumulate an incoming gradient contribution.

        Notes
        -----
        - Ignored when `requires_grad` is False.
        - The first contribution is stored as-is; later ones are summed.
        """
        if not self._requires_grad:
            return
        if self._grad is None:
            self._grad = grad
        else:
            self._grad = Variable(self._grad.data + grad.data, requires_grad=False)

    def zero_grad(self) -> None:
        """
        Drop the stored gradient reference.
        """
        self._grad = None

    # ---- forward-only arithmetic ----
    def _binary(self, other: Union["Variable", Any], op) -> "Variable":
        if isinstance(other, Variable):
            return Variable(
                op(self._data, other._data),
                requires_grad=self._requires_grad or other._requires_grad,
            )
        return Variable(op(self._data, np.asarray(other)), requires_grad=self._requires_grad)

    def __add__(self, other: Union["Variable", Any]) -> "Variable":
        return self._binary(other, np.add)

    def __mul__(self, other: Union["Variable", Any]) -> "Variable":
        return self._binary(other, np.multiply)

    def __matmul__(self, other: Union["Variable", Any]) -> "Variable":
        return self._binary(other, np.matmul)

    def __repr__(self) -> str:
        return (
            f"Variable(shape={self.shape}, dtype={self.dtype}, "
            f"requires_grad={self._requires_grad})"
        )
