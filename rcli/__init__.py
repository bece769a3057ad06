"""rcli — password generation and csv conversion from the command line."""

__version__ = "0.1.0"
