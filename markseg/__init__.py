"""Line-oriented parsers for fenced code, indented code, setext underline and blank line segments."""

__version__ = "0.1.0"