"""
Defaults for command line front-end, optionally loaded from YAML file:

```
precision: single
scaling: proportional
alignment: top_left
```
"""
import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from geomutils.errors import ConfigError
from geomutils.geometry import FloatPrecision
from geomutils.layout import Alignment, ScalingPolicy

LOG = logging.getLogger(__name__)


class GeometryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    precision: FloatPrecision = FloatPrecision.DOUBLE
    scaling: ScalingPolicy = ScalingPolicy.PROPORTIONAL
    alignment: Alignment = Alignment.CENTER

    @field_validator("precision", "scaling", "alignment", mode="before")
    @classmethod
    def _parse_enum(cls, v, info):
        enum_type = cls.model_fields[info.field_name].annotation
        # InvalidArgument is a ValueError, pydantic reports it as validation error
        return enum_type.parse(v)


def load_config(path: Union[Path, str]) -> GeometryConfig:
    """
    Loads config from YAML file.
    :param path: file location
    :return: loaded config, missing fields have default values.
    """
    path = Path(path)
    LOG.debug(f"Loading config from {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Can't read config {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config {path}: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} should be a mapping, got {type(data).__name__}")

    try:
        return GeometryConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}")
