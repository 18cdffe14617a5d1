"""Errors raised by the package."""


class InvalidParameterError(ValueError):
    """An integer parameter does not satisfy its operation's constraint.

    Parameters
    ----------
    name
        Name of the offending parameter.

    value
        Value received for the parameter.

    constraint
        Description of values that would have been valid, for example
        ">= 0".
    """

    def __init__(self, name: str, value, constraint: str):
        self.name = name
        self.value = value
        self.constraint = constraint
        msg = f"`{name}` must be {constraint}, although received {value!r}."
        super().__init__(msg)
