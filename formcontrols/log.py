#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from logging import FileHandler, Formatter, getLogger
from pathlib import Path

logger = getLogger("formcontrols")

LOG_FORMAT = "%(asctime)s [%(levelno)s] [%(name)s %(process)d] %(message)s"


def init_logging(log_file: Path) -> None:
    handler = FileHandler(log_file, encoding="UTF-8")
    handler.setFormatter(Formatter(LOG_FORMAT))
    root = getLogger()
    del root.handlers[:]  # Remove all previously existing handlers
    root.addHandler(handler)


def set_log_levels(log_levels: dict[str, int]) -> None:
    for name, level in _augmented_log_levels(log_levels).items():
        getLogger(name).setLevel(level)


# To see log entries from libraries, reuse the level of the formcontrols logger.
def _augmented_log_levels(log_levels: dict[str, int]) -> dict[str, int]:
    root_level = log_levels.get("formcontrols")
    all_levels = {} if root_level is None else {"": root_level}
    all_levels.update(log_levels)
    return all_levels
