"""
Module (computation unit) interface definitions.

This module defines the domain-level interface for neural network modules
using structural subtyping via `typing.Protocol`. Any object that supplies
the members below is a valid computation unit, which keeps the domain
contract independent from the infrastructure base class that most concrete
layers derive from.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ._variable import IVariable


@runtime_checkable
class IModule(Protocol):
    """
    Domain-level module interface.

    A module owns an ordered, positionally addressed list of parameters,
    switches between training and evaluation mode, and maps one input
    variable to one output variable.

    Notes
    -----
    - Parameter order is defined by the implementing module and is part of
      its public contract: callers index into `parameters()` positionally.
    - This interface is safe to use with `isinstance` checks due to the
      `@runtime_checkable` decorator. Such checks only verify member
      presence, not signatures.
    """

    def forward(self, x: IVariable) -> IVariable:
        """
        Execute the forward computation of the module.

        Parameters
        ----------
        x : IVariable
            Input value.

        Returns
        -------
        IVariable
            Output value computed by the module.
        """
        ...

    def parameters(self) -> List[IVariable]:
        """
        Return the module's parameters in their positional order.
        """
        ...

    def train(self) -> None:
        """
        Switch to training mode and enable gradient tracking on parameters.
        """
        ...

    def eval(self) -> None:
        """
        Switch to evaluation mode and disable gradient tracking on parameters.
        """
        ...

    def pretty_string(self) -> str:
        """
        Return a deterministic, human-readable label for the module.
        """
        ...
