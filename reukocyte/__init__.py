"""Line-based layout checks for Ruby source, with iterative autocorrection."""

__version__ = "0.0.1"