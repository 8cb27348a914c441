# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Process-wide defaults.

Values are read from environment variables first, then from a `quiver.yaml`
file in the working directory, then fall back to the defaults below. These
are only the starting values for a `Config`, each evaluation context owns and
can change its own copy.
"""

import datetime
import typing
from os import environ
from pathlib import Path

_config_values: dict = {}

# we need a preliminary version of this variable
_QUIVER_DEBUG = environ.get("QUIVER_DEBUG") is not None


def parse_yaml(yaml_str):
    """
    Parse the small subset of YAML the config file uses: `key: value` pairs and
    lists of scalars, either inline (`[a, b]`) or as `- item` lines.
    """

    def line_value(value):
        value = value.strip()
        if value.lstrip("-").isdigit():
            value = int(value)
        elif value.lstrip("-").replace(".", "", 1).isdigit():
            value = float(value)
        elif value.lower() == "true":
            return True
        elif value.lower() == "false":
            return False
        elif value.lower() == "none":
            return None
        elif value.startswith("["):
            return [val.strip() for val in value[1:-1].split(",") if val.strip()]
        return value

    result: dict = {}
    lines = yaml_str.strip().split("\n")
    value: typing.Any = ""
    in_list = False
    list_key = ""
    for line in lines:
        ## remove comments
        line = line.split("#")[0]
        line = line.strip()
        if not line:
            continue
        if in_list:
            if line.startswith("- "):
                result[list_key].append(line_value(line[2:]))
                continue
            in_list = False
        key, value = line.split(":", 1)
        if not value.strip():
            in_list = True
            list_key = key.strip()
            result[list_key] = []
        else:
            result[key.strip()] = line_value(value)
    return result


try:  # pragma: no cover
    _config_path = Path(".") / "quiver.yaml"
    if _config_path.exists():
        with open(_config_path, "r") as _config_file:
            _config_values = parse_yaml(_config_file.read())
        if _QUIVER_DEBUG:
            print(f"{datetime.datetime.now()} [LOADER] Loading config from {_config_path}")
except Exception as exception:  # pragma: no cover # it doesn't matter why - just use the defaults
    if _QUIVER_DEBUG:
        print(f"{datetime.datetime.now()} [LOADER] Config file {_config_path} not used - {exception}")


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


# fmt:off

# the index origin, 0 or 1, used when reporting positions (e.g. grade)
INDEX_ORIGIN: int = int(get("INDEX_ORIGIN", 1))
# the mantissa size, in bits, that floating point column values are decoded to
FLOAT_PRECISION: int = int(get("FLOAT_PRECISION", 256))
# printf-style format for numbers, empty means the default rendering
NUMBER_FORMAT: str = get("NUMBER_FORMAT", "") or ""
# debug mode
QUIVER_DEBUG: bool = bool(get("QUIVER_DEBUG", False))
# fmt:on
