# -*- coding: utf-8 -*-

"""
local file paths enumeration.
"""

from pathlib_mate import Path

# python package directory
dir_package = Path.dir_here(__file__)

# glue job script template
path_glue_script_template = dir_package.joinpath("glue_script_template.txt")
