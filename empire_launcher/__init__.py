"""Generic entry-point launcher: resolve a target by name, call its main(args)."""
from .errors import LauncherError, TypeNotFoundError, EntryPointNotFoundError, InvocationError, ConfigError
from .launcher import LaunchRequest, EntryPointLauncher

__all__ = [
    "LauncherError", "TypeNotFoundError", "EntryPointNotFoundError", "InvocationError", "ConfigError",
    "LaunchRequest", "EntryPointLauncher",
]
