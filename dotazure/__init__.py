# -*- coding: utf-8 -*-
"""
Load environment variables from an Azure Developer CLI (azd) project.

    import dotazure
    if dotazure.load():
        print("loaded environment variables")
"""

from .config import CONFIG_FILE_NAME, ENVIRONMENT_DIR_NAME, ENVIRONMENT_FILE_NAME, PROJECT_FILE_NAME
from .context import AzdContext, AzdContextBuilder
from .errors import Error, ErrorKind
from .loader import DotenvApplier, EnvFileApplier, Loader, load, loader

__all__ = [
    "AzdContext", "AzdContextBuilder",
    "Error", "ErrorKind",
    "DotenvApplier", "EnvFileApplier", "Loader", "load", "loader",
    "CONFIG_FILE_NAME", "ENVIRONMENT_DIR_NAME", "ENVIRONMENT_FILE_NAME", "PROJECT_FILE_NAME",
]
