## runtime settings for geo3d
## Copyright (c) 2026 the geo3d authors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Settings loading with YAML file and environment variable support.

Settings come from, in increasing priority:
- the built-in defaults
- a YAML mapping, named explicitly or by ``GEO3D_CONFIG``
- the environment variables ``GEO3D_EPSILON`` and ``GEO3D_LOG_LEVEL``

Example YAML::

    epsilon: 1.0e-6
    log_level: DEBUG
    log_file: geo3d.log

Loading settings has no side effects; ``configure`` applies them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from math import isfinite
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from geo3d import geom
from geo3d.logging_config import setup_logging

__all__ = [
    "GEO3D_CONFIG",
    "GEO3D_EPSILON",
    "GEO3D_LOG_LEVEL",
    "Settings",
    "load_settings",
    "configure",
]

logger = logging.getLogger(__name__)

# environment variable names
GEO3D_CONFIG = "GEO3D_CONFIG"
GEO3D_EPSILON = "GEO3D_EPSILON"
GEO3D_LOG_LEVEL = "GEO3D_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Process-wide geo3d settings."""

    epsilon: float = 1.0e-6
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        try:
            eps = float(self.epsilon)
        except (TypeError, ValueError) as err:
            raise ValueError(f'invalid epsilon: {self.epsilon!r}') from err
        if not (eps > 0.0 and isfinite(eps)):
            raise ValueError(f'epsilon must be a positive finite number, got {eps!r}')
        object.__setattr__(self, 'epsilon', eps)

        level = str(self.log_level).upper()
        if level not in _LEVELS:
            raise ValueError(f'unknown log level: {self.log_level!r}')
        object.__setattr__(self, 'log_level', level)

        if self.log_file is not None:
            object.__setattr__(self, 'log_file', str(self.log_file))


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'config file {path} must contain a mapping')
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f'unknown config keys in {path}: {", ".join(map(str, unknown))}')
    return data


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    """Build ``Settings`` from defaults, a YAML file and the environment.

    Args:
        path: YAML file to read.  Defaults to the file named by the
            ``GEO3D_CONFIG`` environment variable, if set.
    """
    if path is None:
        env_path = os.environ.get(GEO3D_CONFIG)
        if env_path:
            path = env_path

    values: Dict[str, Any] = {}
    if path is not None:
        logger.debug("reading settings from %s", path)
        values.update(_read_yaml(Path(path)))

    eps = os.environ.get(GEO3D_EPSILON)
    if eps:
        values['epsilon'] = eps
    level = os.environ.get(GEO3D_LOG_LEVEL)
    if level:
        values['log_level'] = level

    return replace(Settings(), **values)


def configure(settings: Optional[Settings] = None) -> Settings:
    """Install ``settings`` (loaded if omitted) for the whole process."""
    if settings is None:
        settings = load_settings()
    geom.set_epsilon(settings.epsilon)
    setup_logging(getattr(logging, settings.log_level), settings.log_file)
    return settings
