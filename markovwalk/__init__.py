"""Word-level bigram Markov chains for generating tweet-like text."""

__version__ = "0.1.0"
