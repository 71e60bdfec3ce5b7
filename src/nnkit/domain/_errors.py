"""
Exceptions raised by nnkit modules and the serialization layer.

`ParameterIndexError` signals a contract violation by the caller (an index
outside the parameter list) and is never recovered from inside the library.
The serialization errors report malformed or incompatible persisted state.
"""


class ParameterIndexError(IndexError):
    """
    Raised when a parameter position lies outside ``[0, size)``.

    Attributes
    ----------
    position : int
        The requested position.
    size : int
        Number of parameters owned by the module.
    """

    def __init__(self, position: int, size: int) -> None:
        """
        Initialize the ParameterIndexError.

        Parameters
        ----------
        position : int
            The out-of-range position that was requested.
        size : int
            The number of parameters owned by the module.
        """
        super().__init__(
            f"Module parameter index {position} out of range for {size} parameter(s)."
        )
        self.position = position
        self.size = size


class SerializationError(ValueError):
    """
    Raised when module state cannot be encoded, decoded or restored.
    """


class UnknownModuleTypeError(SerializationError):
    """
    Raised when a persisted module names a type that was never registered.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Unknown module type '{type_name}'. Register it via @register_module."
        )
        self.type_name = type_name


class CheckpointFormatError(SerializationError):
    """
    Raised when a checkpoint file carries an unsupported format tag.
    """

    def __init__(self, fmt: object) -> None:
        super().__init__(f"Unsupported checkpoint format: {fmt!r}")
        self.fmt = fmt
