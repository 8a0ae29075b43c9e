"""
This module provides a convenient entry point for setting global
configuration options for the electrode package.
"""

from electrode._utils import (
    load_electrode_options,
    reset_electrode_options,
    set_electrode_option,
)

__all__ = ["load_electrode_options", "reset_electrode_options", "set_electrode_option"]
