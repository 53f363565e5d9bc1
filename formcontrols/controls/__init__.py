#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from formcontrols.controls.base import AbstractControl, Control
from formcontrols.controls.button import Button, ButtonKind
from formcontrols.controls.checkbox import Checkbox
from formcontrols.controls.container import AbstractContainer, Container, ContainerMixin
from formcontrols.controls.email import EmailField
from formcontrols.controls.field import Field
from formcontrols.controls.fieldset import FieldSet
from formcontrols.controls.form import Form
from formcontrols.controls.label import Label
from formcontrols.controls.number import DoubleField, IntegerField
from formcontrols.controls.radio import Radio, RadioGroup
from formcontrols.controls.select import (
    EMPTY_OPTION,
    Option,
    OptionGroup,
    OptionList,
    option_list_registry,
    Select,
)
from formcontrols.controls.text import HiddenField, PasswordField, RegexField, TextArea, TextField

__all__ = [
    "AbstractContainer",
    "AbstractControl",
    "Button",
    "ButtonKind",
    "Checkbox",
    "Container",
    "ContainerMixin",
    "Control",
    "DoubleField",
    "EMPTY_OPTION",
    "EmailField",
    "Field",
    "FieldSet",
    "Form",
    "HiddenField",
    "IntegerField",
    "Label",
    "Option",
    "OptionGroup",
    "OptionList",
    "option_list_registry",
    "PasswordField",
    "Radio",
    "RadioGroup",
    "RegexField",
    "Select",
    "TextArea",
    "TextField",
]
