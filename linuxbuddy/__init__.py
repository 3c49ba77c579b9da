"""LinuxBuddy — ask a local model for bash commands and answers from the terminal."""

__version__ = "0.2.0"
