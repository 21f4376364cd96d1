class LauncherError(Exception):
    def __init__(self, target:str, message:str):
        super().__init__(message)
        self.target=target

class TypeNotFoundError(LauncherError):
    """Target name does not resolve to a loadable module or class."""

class EntryPointNotFoundError(LauncherError):
    """Target resolved but has no callable entry taking a single argument list."""

class InvocationError(LauncherError):
    """The entry function itself raised."""

class ConfigError(LauncherError):
    """Config file is not valid YAML or not a mapping; target is the file path."""
