"""Option module from Cmdopts."""

import logging
from re import fullmatch
from pathlib import Path
from dataclasses import dataclass
from typing import Any


logger = logging.getLogger(__name__)

SHORT_NAME_REGEX: str = r"^[^\0-]$"
LONG_NAME_REGEX: str = r"^[^-\0].*$"

LONG_NAME_PREFIX: str = "--"
SHORT_NAME_PREFIX: str = "-"


@dataclass(slots=True)
class OptionContractError(AssertionError):
    """
    Cmdopts Exception class for programming errors made while declaring or querying options.
    """

    msg: str

    def __str__(self) -> str:
        return self.msg


@dataclass(slots=True)
class InvalidArgumentValue(Exception):
    """
    Cmdopts Exception class for user supplied option arguments that fail validation.
    """

    option: str
    value: str
    cause: str

    def __str__(self) -> str:
        return f"Invalid argument '{self.value}' for option {self.option}: {self.cause}"


def _require(condition: bool, msg: str) -> None:
    if not condition:
        raise OptionContractError(msg)


def make_path(raw: str) -> Path:
    """
    Builds a `Path` out of user supplied text.
    Raises ValueError if the text can't name a file.
    """
    if raw == "":
        raise ValueError("Path cannot be empty")
    if "\0" in raw:
        raise ValueError("Path cannot contain NUL characters")
    return Path(raw)


@dataclass(frozen=True, slots=True)
class _OptionData:
    """
    Internal option data used by Cmdopts.
    """

    long_name: str
    description: str
    short_name: str | None = None
    arg_name: str = ""
    default_value: str | None = None


@dataclass(frozen=True, slots=True, init=False)
class BaseOption:
    """
    Description of a command line option.
    Concrete option types that take an argument must reimplement `validate` and `convert`.
    """

    data: _OptionData

    def __init__(
        self,
        long_name: str,
        description: str,
        arg_name: str | None = None,
        default_value: str | None = None,
        *,
        short_name: str | None = None,
    ) -> None:
        _require(
            isinstance(long_name, str) and fullmatch(LONG_NAME_REGEX, long_name) is not None,
            f"Long option name must be a non-empty string without leading dashes ({long_name!r})",
        )
        if short_name is not None:
            _require(
                isinstance(short_name, str)
                and fullmatch(SHORT_NAME_REGEX, short_name) is not None,
                f"Short option name must be a single character ({short_name!r})",
            )
        object.__setattr__(
            self,
            "data",
            _OptionData(
                long_name=long_name,
                description=description,
                short_name=short_name,
                arg_name=arg_name or "",
                default_value=default_value,
            ),
        )

    # =============================================
    #                Query methods
    # =============================================
    def has_short_name(self) -> bool:
        return self.data.short_name is not None

    def short_name(self) -> str:
        _require(self.has_short_name(), f"Option '{self.data.long_name}' has no short name")
        return self.data.short_name

    def long_name(self) -> str:
        return self.data.long_name

    def description(self) -> str:
        return self.data.description

    def needs_arg(self) -> bool:
        """
        Whether the option must be followed by an argument.
        """
        return self.data.arg_name != ""

    def arg_name(self) -> str:
        """
        Name of the option's argument, for documentation purposes only.
        """
        _require(self.needs_arg(), f"Option '{self.data.long_name}' takes no argument")
        return self.data.arg_name

    def has_default_value(self) -> bool:
        _require(self.needs_arg(), f"Option '{self.data.long_name}' takes no argument")
        return self.data.default_value is not None

    def default_value(self) -> str:
        _require(
            self.has_default_value(),
            f"Option '{self.data.long_name}' has no default value",
        )
        return self.data.default_value

    # =============================================
    #              Formatting methods
    # =============================================
    def format_short_name(self) -> str:
        """
        Short name as shown in usage messages (Example: -o FILE).
        """
        if self.needs_arg():
            return f"{SHORT_NAME_PREFIX}{self.short_name()} {self.arg_name()}"
        return f"{SHORT_NAME_PREFIX}{self.short_name()}"

    def format_long_name(self) -> str:
        """
        Long name as shown in usage messages (Example: --output=FILE).
        """
        if self.needs_arg():
            return f"{LONG_NAME_PREFIX}{self.long_name()}={self.arg_name()}"
        return f"{LONG_NAME_PREFIX}{self.long_name()}"

    def format_name(self) -> str:
        """
        Name used to refer to the option in error messages (Example: --output).
        """
        return f"{LONG_NAME_PREFIX}{self.long_name()}"

    # =============================================
    #              Argument methods
    # =============================================
    def validate(self, raw: str) -> None:
        """
        Checks an argument given to the option in the command line.
        Raises `InvalidArgumentValue` if `raw` is not acceptable for this option.
        """
        raise OptionContractError("Option does not support an argument")

    def convert(self, raw: str) -> Any:
        """
        Turns an argument that already went through `validate` into its typed value.
        """
        raise OptionContractError("Option does not support an argument")


class BoolOption(BaseOption):
    """
    A flag. Its presence in the command line is its value.
    """

    __slots__ = ()

    def __init__(
        self, long_name: str, description: str, *, short_name: str | None = None
    ) -> None:
        super().__init__(long_name, description, short_name=short_name)


class PathOption(BaseOption):
    """
    An option whose argument names a file.
    """

    __slots__ = ()

    def __init__(
        self,
        long_name: str,
        description: str,
        arg_name: str = "PATH",
        default_value: str | None = None,
        *,
        short_name: str | None = None,
    ) -> None:
        _require(bool(arg_name), f"Path option '{long_name}' needs an argument name")
        super().__init__(
            long_name, description, arg_name, default_value, short_name=short_name
        )

    def validate(self, raw: str) -> None:
        try:
            make_path(raw)
        except ValueError as e:
            logger.debug("Rejected argument %r for option %s: %s", raw, self.format_name(), e)
            raise InvalidArgumentValue(self.format_name(), raw, str(e)) from e

    def convert(self, raw: str) -> Path:
        try:
            return make_path(raw)
        except ValueError as e:
            raise OptionContractError(
                f"Raw value '{raw}' for path option not properly validated: {e}"
            ) from e


class StringOption(BaseOption):
    """
    An option whose argument is taken as is.
    """

    __slots__ = ()

    def __init__(
        self,
        long_name: str,
        description: str,
        arg_name: str = "ARG",
        default_value: str | None = None,
        *,
        short_name: str | None = None,
    ) -> None:
        _require(bool(arg_name), f"String option '{long_name}' needs an argument name")
        super().__init__(
            long_name, description, arg_name, default_value, short_name=short_name
        )

    def validate(self, raw: str) -> None:
        # Every string is valid.
        pass

    def convert(self, raw: str) -> str:
        return raw
