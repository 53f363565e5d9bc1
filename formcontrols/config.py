#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import copy
import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, field, fields, make_dataclass
from functools import partial
from pathlib import Path
from typing import Any

from formcontrols import i18n, log
from formcontrols.exceptions import MKConfigError
from formcontrols.i18n import _

CONFIG_FILE = "formcontrols.mk"
CONFIG_DIR = "formcontrols.d"


@dataclass
class Config:
    """Holds the configuration used while processing and rendering controls

    Every Context carries one of these. Controls which are rendered without a
    context use the defaults.
    """

    error_css_class: str = "error"
    disabled_css_class: str = "disabled"
    text_field_size: int = 20
    email_field_size: int = 30
    trim_request_values: bool = True
    language: str = "en"
    locale_dirs: list[str] = field(default_factory=list)
    log_levels: dict[str, int] = field(default_factory=lambda: {"formcontrols": logging.WARNING})
    messages: dict[str, str] = field(default_factory=dict)


# .
#   .--Functions-----------------------------------------------------------.
#   |             _____                 _   _                              |
#   |            |  ___|   _ _ __   ___| |_(_) ___  _ __  ___              |
#   |            | |_ | | | | '_ \ / __| __| |/ _ \| '_ \/ __|             |
#   |            |  _|| |_| | | | | (__| |_| | (_) | | | \__ \             |
#   |            |_|   \__,_|_| |_|\___|\__|_|\___/|_| |_|___/             |
#   |                                                                      |
#   +----------------------------------------------------------------------+
#   |  Helper functions for config parsing                                 |
#   '----------------------------------------------------------------------'


def initialize(config: Config) -> None:
    log.set_log_levels(config.log_levels)
    i18n.localize(config.language, [Path(p) for p in config.locale_dirs])
    execute_post_config_load_hooks(config)


def _load_config_file_to(path: Path, raw_config: dict[str, Any]) -> None:
    """Load the given configuration file"""
    try:
        with path.open("rb") as f:
            exec(compile(f.read(), str(path), "exec"), {}, raw_config)  # nosec B102
    except FileNotFoundError:
        pass
    except Exception as e:
        raise MKConfigError(_("Cannot read configuration file %s: %s:") % (path, e))


def load_config(config_dir: Path) -> Config:
    """Load formcontrols.mk and all *.mk files below formcontrols.d/

    Files in formcontrols.d/ are read in sorted order, later files override
    the values of earlier ones."""
    # Set default values for all user-changable configuration settings
    raw_config = get_default_config()

    # First load main file
    _load_config_file_to(config_dir / CONFIG_FILE, raw_config)

    # Load also recursively all files below formcontrols.d
    conf_dir = config_dir / CONFIG_DIR
    if conf_dir.is_dir():
        for path in sorted(conf_dir.rglob("*.mk")):
            _load_config_file_to(path, raw_config)

    return make_config_object(raw_config)


def make_config_object(raw_config: dict[str, Any]) -> Config:
    """Create the runtime config object

    In case a config file introduces variables which are unknown to Config, a dynamic
    class is created which makes the Config class accept the additional values.
    """
    default_keys = {f.name for f in fields(Config())}
    configured_keys = set(raw_config.keys())
    custom_keys = configured_keys - default_keys
    if not custom_keys:
        cls: type = Config
    else:
        cls = make_dataclass(
            "ExtendedConfig",
            fields=[
                (k, object, field(default_factory=partial(raw_config.__getitem__, k)))
                for k in custom_keys
            ],
            bases=(Config,),
        )

    return cls(**raw_config)  # type: ignore[no-any-return]


def execute_post_config_load_hooks(config: Config) -> None:
    for func in _post_config_load_hooks:
        func(config)


_post_config_load_hooks: list[Callable[[Config], None]] = []


def register_post_config_load_hook(func: Callable[[Config], None]) -> None:
    _post_config_load_hooks.append(func)


def get_default_config() -> dict[str, Any]:
    return copy.deepcopy(asdict(Config()))
