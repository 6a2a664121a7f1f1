"""
Checks applied to user-supplied iteration functions and parameter sets before
they reach the catalog. How the callable was produced is the caller's business;
finiteness of its output can only be checked while iterating, so that is left
to the engine.
"""
import inspect
import math
import numbers

from .errors import InvalidIterationFunction, InvalidParameters
from .systems import Parameters


def checkIterationFunction(fn):
    if not callable(fn):
        raise InvalidIterationFunction("Iteration function should be callable, got {!r}".format(fn))
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signature
        return fn
    try:
        signature.bind(object(), object())
    except TypeError as e:
        raise InvalidIterationFunction(
            "Iteration function should accept (point, parameters), signature is {}".format(signature)
        ) from e
    return fn


def checkParameters(mapping) -> Parameters:
    if isinstance(mapping, Parameters):
        return mapping
    try:
        items = list(mapping.items())
    except AttributeError:
        raise InvalidParameters("Parameters should be a mapping, got {!r}".format(mapping)) from None
    for name, value in items:
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidParameters("Parameter name {!r} is not a valid identifier".format(name))
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidParameters("Parameter '{}' should be a real number, got {!r}".format(name, value))
        if not math.isfinite(value):
            raise InvalidParameters("Parameter '{}' should be finite, got {}".format(name, value))
    return Parameters(**dict(items))
