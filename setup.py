#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from setuptools import find_packages, setup

setup(
    name="formcontrols",
    version="1.0.0",
    description="Server side form controls which bind to request parameters and render HTML",
    packages=find_packages(include=["formcontrols", "formcontrols.*"]),
    include_package_data=True,
    python_requires=">=3.12",
    install_requires=["flask>=3.0", "werkzeug>=3.0", "marshmallow>=3.20"],
    extras_require={"test": ["pytest>=8"]},
)
