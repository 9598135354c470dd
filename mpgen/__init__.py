"""
Memorable passphrase generator package.
"""

from .config import DEFAULT_CONFIG, Config, ConfigBuilder, ConfigOptions, build_config
from .password_maker import PasswordMaker, generate_passwords
from .types import (
    EmptyString,
    InvalidEnum,
    InvalidNumber,
    PaddingType,
    RngType,
    ValidationError,
    WordTransformation,
)

__all__ = [
    "Config",
    "ConfigBuilder",
    "ConfigOptions",
    "DEFAULT_CONFIG",
    "EmptyString",
    "InvalidEnum",
    "InvalidNumber",
    "PaddingType",
    "PasswordMaker",
    "RngType",
    "ValidationError",
    "WordTransformation",
    "build_config",
    "generate_passwords",
]
