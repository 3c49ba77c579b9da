"""Exception hierarchy for LinuxBuddy."""


class LinuxBuddyError(Exception):
    """Base exception for all application-specific errors."""


class BackendError(LinuxBuddyError):
    """Raised when the chat backend fails, before or during streaming."""


class SettingsError(LinuxBuddyError):
    """Raised when configuration cannot be loaded or saved."""
