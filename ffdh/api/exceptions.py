"""Exception definitions for ffdh API"""

from typing import Optional, TYPE_CHECKING

from ..constants import ErrorCode, ErrorKind, MAX_BATCHES, MSG_NO_MATCH

if TYPE_CHECKING:
    from ..models.result import ExecutionOutcome


class FfdhError(Exception):
    """Base exception for ffdh"""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class SettingsError(FfdhError):
    """Settings file error"""

    kind = ErrorKind.INVALID_SETTINGS

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SETTINGS_FORMAT_ERROR)


class ValidationError(FfdhError):
    """Preflight validation error"""
    pass


class MissingFunctionsFileError(ValidationError):
    """Functions list file not found"""

    kind = ErrorKind.MISSING_FUNCTIONS_FILE

    def __init__(self, path: str):
        super().__init__(
            f"Unable to locate the {path} file",
            ErrorCode.FUNCTIONS_FILE_NOT_FOUND
        )
        self.path = path


class MalformedFunctionsFileError(ValidationError):
    """Functions list file could not be parsed"""

    kind = ErrorKind.MALFORMED_FUNCTIONS_FILE

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Unable to read the function list in {path}: {reason}",
            ErrorCode.FUNCTIONS_FILE_MALFORMED
        )
        self.path = path
        self.reason = reason


class MissingProjectConfigError(ValidationError):
    """Project config file not found"""

    kind = ErrorKind.MISSING_PROJECT_CONFIG

    def __init__(self, path: str):
        super().__init__(
            f"Unable to locate the {path} file",
            ErrorCode.PROJECT_CONFIG_NOT_FOUND
        )
        self.path = path


class MalformedProjectConfigError(ValidationError):
    """Project config file could not be parsed"""

    kind = ErrorKind.MALFORMED_PROJECT_CONFIG

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Unable to read the project config in {path}: {reason}",
            ErrorCode.PROJECT_CONFIG_MALFORMED
        )
        self.path = path
        self.reason = reason


class MissingFunctionsDirectoryError(ValidationError):
    """Functions source folder not found"""

    kind = ErrorKind.MISSING_FUNCTIONS_DIRECTORY

    def __init__(self, path: str):
        super().__init__(
            f"Unable to locate the {path} folder",
            ErrorCode.FUNCTIONS_DIRECTORY_NOT_FOUND
        )
        self.path = path


class MissingExternalToolError(ValidationError):
    """Deploy command not found on PATH"""

    kind = ErrorKind.MISSING_EXTERNAL_TOOL

    def __init__(self, command: str):
        super().__init__(
            f"Unable to locate the {command} command",
            ErrorCode.DEPLOY_COMMAND_NOT_FOUND
        )
        self.command = command


class SelectionError(FfdhError):
    """Function selection error"""
    pass


class NoSelectionCriteriaError(SelectionError):
    """Search mode used without a prefix or suffix"""

    kind = ErrorKind.NO_SELECTION_CRITERIA

    def __init__(self, message: str = "Specify --start and/or --end, or --batches"):
        super().__init__(message, ErrorCode.NO_SELECTION_CRITERIA)


class InvalidBatchCountError(SelectionError):
    """Batch count out of range"""

    kind = ErrorKind.INVALID_BATCH_COUNT

    def __init__(self, total_batches: int):
        super().__init__(
            f"Invalid batches value: {total_batches} (Must be 1-{MAX_BATCHES})",
            ErrorCode.INVALID_BATCH_COUNT
        )
        self.total_batches = total_batches


class InvalidBatchIndexError(SelectionError):
    """Batch index out of range"""

    kind = ErrorKind.INVALID_BATCH_INDEX

    def __init__(self, batch_index: int, total_batches: int):
        super().__init__(
            f"Invalid batch value: {batch_index} (Must be 1-{total_batches})",
            ErrorCode.INVALID_BATCH_INDEX
        )
        self.batch_index = batch_index
        self.total_batches = total_batches


class EmptySelectionError(SelectionError):
    """Nothing matched the selection"""

    kind = ErrorKind.EMPTY_SELECTION

    def __init__(self, message: str = MSG_NO_MATCH):
        super().__init__(message, ErrorCode.EMPTY_SELECTION)


class ExternalToolFailure(FfdhError):
    """Deploy command failed to start or exited non-zero"""

    kind = ErrorKind.EXTERNAL_TOOL_FAILURE

    def __init__(self, message: str, returncode: int,
                 outcome: Optional['ExecutionOutcome'] = None):
        super().__init__(message, ErrorCode.DEPLOY_COMMAND_FAILED)
        self.returncode = returncode
        self.outcome = outcome
