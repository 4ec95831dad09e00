"""harscope - command line HAR analyser."""

__version__ = "0.3.0"
