"""Cmdopts, descriptors for command line options."""

from .option import (
    BaseOption,
    BoolOption,
    PathOption,
    StringOption,
    InvalidArgumentValue,
    OptionContractError,
)

__all__: list[str] = [
    "BaseOption",
    "BoolOption",
    "PathOption",
    "StringOption",
    "InvalidArgumentValue",
    "OptionContractError",
]
