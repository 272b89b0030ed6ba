"""Inspect and adjust the process locale."""

from __future__ import annotations

import locale
import os
import sys
from dataclasses import dataclass

_ASCII_NAME = "US-ASCII"

_LOCALE_VARIABLES = (
    "LANG",
    "LANGUAGE",
    "LC_CTYPE",
    "LC_NUMERIC",
    "LC_TIME",
    "LC_COLLATE",
    "LC_MONETARY",
    "LC_MESSAGES",
    "LC_PAPER",
    "LC_NAME",
    "LC_ADDRESS",
    "LC_TELEPHONE",
    "LC_MEASUREMENT",
    "LC_IDENTIFICATION",
    "LC_ALL",
)


@dataclass(frozen=True)
class LocaleVar:
    """An environment variable that selects the character set."""

    name: str
    value: str

    def __str__(self) -> str:
        if not self.name:
            return "[no charset variables]"
        return f"{self.name}={self.value}"


def get_ctype() -> LocaleVar:
    """Return the variable that decides LC_CTYPE, following the C library's order."""
    for name in ("LC_ALL", "LC_CTYPE", "LANG"):
        if name in os.environ:
            return LocaleVar(name, os.environ[name])
    return LocaleVar("", "")


def locale_charset() -> str:
    """Return the character set of the current locale."""
    if hasattr(locale, "nl_langinfo"):
        charset = locale.nl_langinfo(locale.CODESET)
    else:
        charset = locale.getpreferredencoding(False)
    if charset == "ANSI_X3.4-1968":
        return _ASCII_NAME
    return charset


def is_utf8_locale() -> bool:
    """Tell whether the current locale uses UTF-8."""
    return locale_charset() in ("UTF-8", "utf-8")


def set_native_locale() -> bool:
    """Adopt the locale from the environment.

    On failure a diagnostic is written to stderr and False is returned.
    """
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        ctype = get_ctype()
        print(f"The locale requested by {ctype} isn't available here.", file=sys.stderr)
        if ctype.name:
            print(f"Running `locale-gen {ctype.value}' may be necessary.\n", file=sys.stderr)
        return False
    return True


def clear_locale_variables() -> None:
    """Remove every locale-selecting variable from the environment."""
    for name in _LOCALE_VARIABLES:
        os.environ.pop(name, None)