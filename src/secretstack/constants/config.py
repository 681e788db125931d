"""Configuration keys, defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "secretstack.yaml"
GLOBAL_CONFIG_FILENAME: str = "config.yaml"
STATE_FILENAME: str = "state.json"

HOME_ENV_VAR: str = "SECRETSTACK_HOME"
DEFAULT_HOME_DIRNAME: str = ".secretstack"

PROMPT_MODE_KEY: str = "promptToScanBeforePush"
ADD_TO_GITIGNORE_KEY: str = "addToGitIgnore"
IGNORE_FOLDER_KEY: str = "ignoreFolder"

LAST_PROMPT_TIME_KEY: str = "lastSecretScanPromptTime"

DEFAULT_ADD_TO_GITIGNORE: bool = True
DEFAULT_IGNORE_FOLDER: str = ".secret-stack"

SCOPE_WORKSPACE: str = "workspace"
SCOPE_GLOBAL: str = "global"
VALID_SCOPES: frozenset[str] = frozenset({SCOPE_WORKSPACE, SCOPE_GLOBAL})

CONFIG_KEYS: frozenset[str] = frozenset({PROMPT_MODE_KEY, ADD_TO_GITIGNORE_KEY, IGNORE_FOLDER_KEY})

CONFIG_TEMP_PREFIX: str = ".tmp-secretstack-"
CONFIG_TEMP_SUFFIX: str = ".yaml"
STATE_TEMP_PREFIX: str = ".tmp-state-"
STATE_TEMP_SUFFIX: str = ".json"
