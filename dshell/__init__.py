"""Plugin-based desktop shell: applets, containments, panels, their loader and the shell command."""

__version__ = "0.1.0"