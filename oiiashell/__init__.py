"""Shell command-line tokenizer with an interactive prompt, quote joining and dollar expansion."""

__version__ = "0.1.0"