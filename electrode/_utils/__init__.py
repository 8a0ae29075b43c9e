"""
This module exposes utility functions from sub-modules for use
within the electrode package.
"""

from electrode._utils.config import (
    _get_option,
    load_electrode_options,
    reset_electrode_options,
    set_electrode_option,
)
from electrode._utils.helpers import _component_name, _dump_str_to_list
from electrode._utils.inspect import reflect_arguments
from electrode._utils.loaders import _load_options_data
from electrode._utils.parsers import _ConfigReader

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "_ConfigReader",
    "_component_name",
    "_dump_str_to_list",
    "_get_option",
    "_load_options_data",
    "load_electrode_options",
    "reflect_arguments",
    "reset_electrode_options",
    "set_electrode_option",
]
