class LauncherError(Exception):
    """Ends the current run with a message and a non-zero exit."""

class RootDirectoryMissing(LauncherError):
    pass

class NoVersionsFound(LauncherError):
    pass

class NoExecutableFound(LauncherError):
    pass

class LaunchFailed(LauncherError):
    pass

class SelectionCancelled(Exception):
    """User left a prompt empty or answered out of range."""
