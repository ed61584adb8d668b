"""Global constants for ffdh"""

from enum import Enum

# Application identity
APP_NAME = "ffdh"
APP_TITLE = "Firebase Functions Deployment Helper"
LOG_FORMAT = "%(message)s"

# Project files, relative to the project directory
DEFAULT_MANIFEST_FILE = "functions.json"
DEFAULT_PROJECT_CONFIG_FILE = "firebase.json"
SETTINGS_FILE = ".ffdh.yaml"

# Deploy command
DEFAULT_DEPLOY_COMMAND = "firebase"
DEPLOY_SUBCOMMAND = "deploy"
ONLY_FLAG = "--only"
DEFAULT_NAMESPACE_PREFIX = "functions"
NAME_SEPARATOR = ","

# Functions source folder used when the project config does not declare one
DEFAULT_FUNCTIONS_SOURCE = "functions"

# Batch limits
MAX_BATCHES = 25
DEFAULT_BATCH_INDEX = 1

# Exit codes for failures that never produced a child exit status
EXIT_SPAWN_FAILED = 127
EXIT_TIMEOUT = 124
EXIT_INTERRUPTED = 130

# Environment variables
ENV_CONFIG_PATH = "FFDH_CONFIG"
ENV_DEPLOY_COMMAND = "FFDH_DEPLOY_COMMAND"
ENV_LOG_LEVEL = "FFDH_LOG_LEVEL"


class ErrorKind(Enum):
    """Failure categories raised by the preflight, selection and invoke stages"""
    MISSING_FUNCTIONS_FILE = "MissingFunctionsFile"
    MALFORMED_FUNCTIONS_FILE = "MalformedFunctionsFile"
    MISSING_PROJECT_CONFIG = "MissingProjectConfig"
    MALFORMED_PROJECT_CONFIG = "MalformedProjectConfig"
    MISSING_FUNCTIONS_DIRECTORY = "MissingFunctionsDirectory"
    MISSING_EXTERNAL_TOOL = "MissingExternalTool"
    NO_SELECTION_CRITERIA = "NoSelectionCriteria"
    INVALID_BATCH_COUNT = "InvalidBatchCount"
    INVALID_BATCH_INDEX = "InvalidBatchIndex"
    EMPTY_SELECTION = "EmptySelection"
    EXTERNAL_TOOL_FAILURE = "ExternalToolFailure"
    INVALID_SETTINGS = "InvalidSettings"


# Error codes
class ErrorCode:
    SETTINGS_FORMAT_ERROR = "FF001"
    FUNCTIONS_FILE_NOT_FOUND = "FF002"
    FUNCTIONS_FILE_MALFORMED = "FF003"
    PROJECT_CONFIG_NOT_FOUND = "FF004"
    PROJECT_CONFIG_MALFORMED = "FF005"
    FUNCTIONS_DIRECTORY_NOT_FOUND = "FF006"
    DEPLOY_COMMAND_NOT_FOUND = "FF007"
    NO_SELECTION_CRITERIA = "FF008"
    INVALID_BATCH_COUNT = "FF009"
    INVALID_BATCH_INDEX = "FF010"
    EMPTY_SELECTION = "FF011"
    DEPLOY_COMMAND_FAILED = "FF012"


# Display constants
EMOJI_SUCCESS = "✓"

# Messages templates
MSG_LOCATED = f"{EMOJI_SUCCESS} Located {{path}}"
MSG_NO_MATCH = "No function match for specified options"
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployed {{count}} function(s)"
