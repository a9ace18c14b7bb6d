"""Share one mouse between two side-by-side computers over UDP, replaying events with ydotool."""

__version__ = "0.1.0"