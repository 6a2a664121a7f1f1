"""
JSON configuration of the explorer.

A configuration file is a JSON object; any key left out falls back to
DEFAULT_CONFIG. Some keys are accepted under several names, see ALTERNATIVES.
"""
import json
import logging

from .errors import ConfigurationError

DEFAULT_CONFIG = {
    "imageShape": [512, 512],
    "iterations": 100000,
    "sliceSize": 1000,
    "system": 0,
    "parameterSet": 0,
    "colourMode": 0,
    "centre": [0.0, 0.0],
    # None means the selected system's initial zoom
    "zoom": None,
    "logLevel": "INFO",
    "logFile": None,
}

ALTERNATIVES = {
    "imageShape": ("imageShape", "size"),
    "iterations": ("iterations", "iterationBudget", "budget"),
    "sliceSize": ("sliceSize", "slice"),
    "system": ("system", "systemIndex"),
    "parameterSet": ("parameterSet", "parameterSetIndex"),
    "colourMode": ("colourMode", "colorMode"),
    "centre": ("centre", "center"),
}

_MISSING = object()


def getAlternatives(d: dict, *alternatives, default=_MISSING):
    for alt in alternatives:
        val = d.get(alt)
        if val is not None:
            return val
    if default is not _MISSING:
        return default
    raise ConfigurationError("No alternative key were found in given dict (alt: {})".format(str(alternatives)))


def _isInt(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _positiveInt(config, key):
    value = config[key]
    if not _isInt(value) or value <= 0:
        raise ConfigurationError("'{}' should be a positive integer, got {!r}".format(key, value))


def _index(config, key):
    value = config[key]
    if not _isInt(value) or value < 0:
        raise ConfigurationError("'{}' should be a non-negative integer, got {!r}".format(key, value))


def normalizeConfig(raw: dict) -> dict:
    if not isinstance(raw, dict):
        raise ConfigurationError("Configuration should be a JSON object, got {}".format(type(raw).__name__))
    config = dict(DEFAULT_CONFIG)
    for key, value in raw.items():
        if key not in ALTERNATIVES and key in DEFAULT_CONFIG:
            config[key] = value
    for key, alternatives in ALTERNATIVES.items():
        config[key] = getAlternatives(raw, *alternatives, default=DEFAULT_CONFIG[key])

    shape = config["imageShape"]
    if not isinstance(shape, (list, tuple)) or len(shape) != 2 \
            or not all(_isInt(v) and v > 0 for v in shape):
        raise ConfigurationError("'imageShape' should be a pair of positive integers, got {!r}".format(shape))
    config["imageShape"] = tuple(shape)

    centre = config["centre"]
    if not isinstance(centre, (list, tuple)) or len(centre) != 2 \
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in centre):
        raise ConfigurationError("'centre' should be a pair of numbers, got {!r}".format(centre))
    config["centre"] = (float(centre[0]), float(centre[1]))

    _positiveInt(config, "sliceSize")
    if not isinstance(config["system"], str):
        _index(config, "system")
    _index(config, "parameterSet")
    _index(config, "colourMode")
    iterations = config["iterations"]
    if not _isInt(iterations) or iterations < 0:
        raise ConfigurationError("'iterations' should be a non-negative integer, got {!r}".format(iterations))

    zoom = config["zoom"]
    if zoom is not None and (not isinstance(zoom, (int, float)) or zoom <= 0):
        raise ConfigurationError("'zoom' should be a positive number, got {!r}".format(zoom))

    level = config["logLevel"]
    if isinstance(level, str):
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ConfigurationError("Unknown log level {!r}".format(level))
        config["logLevel"] = level.upper()
    return config


def loadConfig(path: str = None) -> dict:
    if path is None:
        return normalizeConfig({})
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError("Cannot load configuration from file {}: {}".format(path, e)) from e
    return normalizeConfig(raw)


def configFromArgv(argv) -> dict:
    return loadConfig(argv[1] if len(argv) > 1 else None)


def logLevel(config) -> int:
    level = config["logLevel"]
    return level if isinstance(level, int) else logging.getLevelName(level)
