"""Exceptions raised by codontrans"""
import sys
from typing import Optional

from click import ClickException, echo


class CodonTransException(Exception):
    """Base class of all codontrans Exceptions"""


class CodonTransPrettyException(CodonTransException, ClickException):
    """Exception that does not lead to stack trace on CLI

    Inheriting from ClickException makes ``click`` print only the
    ``self.msg`` value of the exception, rather than allowing Python
    to print a full stack trace.

    This is useful for exceptions indicating usage or configuration
    errors. We use this, instead of `click.UsageError` and friends so
    that the exceptions can be caught and handled explicitly where
    needed.
    """


class CodonTableError(CodonTransPrettyException):
    """The codon table could not be loaded

    Raised if the table source is missing, unreadable or malformed
    (missing columns, bad codon or symbol length, duplicate codons).
    Without a table, no translation can proceed.

    Args:
      msg: The message to display
      source: Path (or description) of the table source
    """
    def __init__(self, msg: str, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(msg)

    def show(self, file=None) -> None:
        super().show(file)
        if file is None:
            file = sys.stderr
        if self.source:
            echo(f"Problem occurred loading codon table {self.source}", file=file)


class UnresolvableCodonError(CodonTransException, KeyError):
    """A codon is not in the codon table

    Args:
      codon: The codon that failed to resolve
      offset: Zero based position of the codon in the sequence
    """
    def __init__(self, codon: str, offset: int) -> None:
        self.codon = codon
        self.offset = offset
        super().__init__(codon)

    def __str__(self):
        return f"Codon '{self.codon}' at offset {self.offset} not in codon table"


class CodonTransConfigError(CodonTransPrettyException):
    """Indicates an error in the codontrans.yml config files

    Args:
      msg: The message to display
      key: Dotted config key causing the error
    """
    def __init__(self, msg: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(msg)

    def format_message(self):
        if self.key:
            return f"{self.message} (config key '{self.key}')"
        return self.message


class CodonTransUsageError(CodonTransPrettyException):
    """General usage error"""
