import json
import logging
import os
import tempfile
import unittest

from attractors.config import loadConfig, configFromArgv, normalizeConfig, getAlternatives, logLevel, DEFAULT_CONFIG
from attractors.errors import ConfigurationError


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.dir.cleanup()

    def write(self, content):
        path = os.path.join(self.dir.name, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content if isinstance(content, str) else json.dumps(content))
        return path

    def test_defaults(self):
        config = loadConfig()
        assert config["imageShape"] == (512, 512)
        assert config["iterations"] == DEFAULT_CONFIG["iterations"]
        assert config["sliceSize"] == 1000
        assert config["zoom"] is None
        assert config["centre"] == (0.0, 0.0)
        assert configFromArgv(["prog"]) == config

    def test_file_overrides(self):
        path = self.write({"iterationBudget": 5000, "size": [320, 200], "center": [1, -1],
                           "system": "Hénon", "zoom": 40, "logLevel": "debug"})
        config = configFromArgv(["prog", path])
        assert config["iterations"] == 5000
        assert config["imageShape"] == (320, 200)
        assert config["centre"] == (1.0, -1.0)
        assert config["system"] == "Hénon"
        assert config["zoom"] == 40
        assert logLevel(config) == logging.DEBUG

    def test_selection_keys(self):
        config = normalizeConfig({"system": 3, "parameterSet": 2, "colorMode": 1})
        assert (config["system"], config["parameterSet"], config["colourMode"]) == (3, 2, 1)
        assert normalizeConfig({"system": "Duffing"})["system"] == "Duffing"

    def test_alternatives(self):
        assert getAlternatives({"b": 2}, "a", "b") == 2
        assert getAlternatives({}, "a", default=3) == 3
        with self.assertRaises(ConfigurationError):
            getAlternatives({}, "a", "b")

    def test_invalid(self):
        for raw in [
            {"imageShape": [0, 10]},
            {"imageShape": [10]},
            {"iterations": -1},
            {"iterations": "many"},
            {"sliceSize": 0},
            {"zoom": -2},
            {"centre": 3},
            {"centre": ["a", 0]},
            {"center": [0, None]},
            {"system": 1.5},
            {"systemIndex": -1},
            {"parameterSet": "first"},
            {"colourMode": 1.0},
            {"colorMode": True},
            {"logLevel": "chatty"},
        ]:
            with self.assertRaises(ConfigurationError, msg=str(raw)):
                normalizeConfig(raw)
        with self.assertRaises(ConfigurationError):
            normalizeConfig([1, 2])

    def test_unreadable(self):
        with self.assertRaises(ConfigurationError):
            loadConfig(os.path.join(self.dir.name, "missing.json"))
        with self.assertRaises(ConfigurationError):
            loadConfig(self.write("{not json"))
