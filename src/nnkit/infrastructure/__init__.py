from ._module import Module
from ._variable import Variable

__all__ = ["Module", "Variable"]
