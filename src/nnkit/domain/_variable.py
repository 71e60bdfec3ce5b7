"""
Autograd-tracked value interface definitions.

This module defines the domain-level contract for the values a module owns
and exchanges during forward computation. Modules never inspect the numerical
contents of a variable; they only toggle gradient tracking and drop
accumulated gradients, so the interface is kept to exactly that surface.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IVariable(Protocol):
    """
    Domain-level interface for autograd-tracked values.

    An `IVariable` is a tensor-like value annotated with whether it takes part
    in gradient tracking. Any object exposing the members below is accepted,
    independent of inheritance.

    Notes
    -----
    - `requires_grad` is read and written by `Module.train()` / `Module.eval()`.
    - `zero_grad()` must drop the gradient reference without touching the
      variable's value or its `requires_grad` flag.
    """

    @property
    def requires_grad(self) -> bool:
        """
        Indicate whether gradients are tracked for this value.

        Returns
        -------
        bool
            True if gradients should be accumulated, False otherwise.
        """
        ...

    @requires_grad.setter
    def requires_grad(self, value: bool) -> None:
        """
        Enable or disable gradient tracking.

        Parameters
        ----------
        value : bool
            New tracking state.
        """
        ...

    @property
    def grad(self) -> Optional["IVariable"]:
        """
        Return the accumulated gradient, or None if none is stored.
        """
        ...

    def zero_grad(self) -> None:
        """
        Clear the stored gradient reference.
        """
        ...
