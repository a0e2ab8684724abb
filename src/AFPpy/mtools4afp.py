"""
Miscellaneous tools used throughout AFPpy: array recasting, argument checking,
and the exceptions raised when a flight model is given unusable parameters.
"""
from functools import wraps
from numbers import Number

import numpy as np

__all__ = [
    "DomainError", "InvalidArgumentError", "MissingParameterError",
    "recastasnpfloatarray", "revert2scalar",
    "require_parameters", "require_positive", "require_nonnegative"
]
__author__ = "Yaseen Reza"


class DomainError(ValueError):
    """A physical parameter lies outside the range its model is defined on."""


class InvalidArgumentError(ValueError):
    """An option was given a value outside of its recognised set."""


class MissingParameterError(TypeError):
    """A required parameter was not supplied, and has no default."""


def recastasnpfloatarray(scalarorarray):
    """
    Recast a scalar, list, tuple, or array as a numpy array of floats.

    Args:
        scalarorarray: The object to recast.

    Returns:
        A numpy array of dtype float, with at least one dimension.

    """
    if isinstance(scalarorarray, Number):
        return np.array([scalarorarray], dtype=float)
    return np.atleast_1d(np.array(scalarorarray, dtype=float))


def revert2scalar(func):
    @wraps(func)
    def with_reverting(*args, **kwargs):
        """Try to turn x into a scalar (if it is an array, list, or tuple)."""

        # Evaluate the wrapped func
        output = func(*args, **kwargs)

        if not isinstance(output, tuple):
            output = (output,)

        # Convert all items in the output to scalar if possible
        new_output = []
        for x in output:
            if isinstance(x, np.ndarray):
                if x.ndim == 0:
                    new_output.append(x.item())
                    continue
                if x.size == 1:
                    new_output.append(x.flat[0])
                    continue
            new_output.append(x)

        # If there was only one output from the function, return that as scalar
        if len(new_output) == 1:
            return new_output[0]

        return tuple(new_output)

    return with_reverting


def require_parameters(funcname: str, **parameters):
    """
    Fail fast if any of the named parameters was left as None.

    Args:
        funcname: Name of the calling function, used in the error message.
        **parameters: The parameters to check, as name=value pairs.

    Raises:
        MissingParameterError: If one or more parameters is None.

    """
    missing = [name for (name, value) in parameters.items() if value is None]
    if missing:
        errormsg = f"{funcname}() is missing required parameter(s): {missing}"
        raise MissingParameterError(errormsg)
    return


def require_positive(**parameters):
    """
    Check that every element of each named parameter is strictly positive.

    Raises:
        DomainError: If any element is zero, negative, or NaN.

    """
    for name, value in parameters.items():
        # NaN fails the comparison, so it is rejected here too
        if not (recastasnpfloatarray(value) > 0).all():
            errormsg = f"Expected {name} > 0, got {name}={value}"
            raise DomainError(errormsg)
    return


def require_nonnegative(**parameters):
    """
    Check that every element of each named parameter is zero or positive.

    Raises:
        DomainError: If any element is negative or NaN.

    """
    for name, value in parameters.items():
        if not (recastasnpfloatarray(value) >= 0).all():
            errormsg = f"Expected {name} >= 0, got {name}={value}"
            raise DomainError(errormsg)
    return
