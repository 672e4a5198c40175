"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum

from typebridge.domain.errors import (
    AttributeNotFoundError,
    ConfigurationError,
    MemberNotCallableError,
    NoMatchingOverloadError,
    TypeBridgeError,
    UnresolvedTypeError,
)


class ExitCode(IntEnum):
    """Exit codes used by the typebridge CLI.

    Values follow errno and sysexits.h where one fits:

    * 22: EINVAL, a call or option the resolved type cannot accept
    * 65: EX_DATAERR, an instance could not be represented at the boundary
    * 70: EX_SOFTWARE, a member is not exposed on the resolved type
    * 78: EX_CONFIG

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    UNRESOLVED_TYPE = 65
    ATTRIBUTE_NOT_FOUND = 70
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


_ERROR_EXIT_CODES: dict[type[Exception], ExitCode] = {
    ConfigurationError: ExitCode.CONFIG_ERROR,
    UnresolvedTypeError: ExitCode.UNRESOLVED_TYPE,
    AttributeNotFoundError: ExitCode.ATTRIBUTE_NOT_FOUND,
    NoMatchingOverloadError: ExitCode.INVALID_ARGUMENT,
    MemberNotCallableError: ExitCode.INVALID_ARGUMENT,
}


def exit_code_for(exc: TypeBridgeError) -> ExitCode:
    """Map a boundary error to its exit code via the nearest mapped class.

    Example:
        >>> from typebridge.domain.errors import ReadOnlyAttributeError
        >>> exit_code_for(ReadOnlyAttributeError("age")).name
        'ATTRIBUTE_NOT_FOUND'
    """
    for cls in type(exc).__mro__:
        code = _ERROR_EXIT_CODES.get(cls)
        if code is not None:
            return code
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
