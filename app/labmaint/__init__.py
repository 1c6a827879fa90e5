"""labmaint - scheduled cleanup and updates for shared school lab computers."""

__version__ = "0.1.0"
