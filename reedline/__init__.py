"""Line editor building blocks: edit commands, events, undo rules, history and hints."""

__version__ = "0.1.0"