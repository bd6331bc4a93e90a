"""gitglance - browse git working-tree status in the terminal."""

__version__ = "0.1.0"
