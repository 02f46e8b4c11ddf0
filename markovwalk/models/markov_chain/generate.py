"""
Markov Chain Text Generation

Drives a trained MarkovChain to build text: one walk is one sentence, and
sentences are appended until the text reaches a target length (a tweet, by
default 280 characters).
"""

import logging


class TextGenerator:
    """
    Builds sentences and tweet-sized texts from a MarkovChain.

    Args:
        chain (MarkovChain): A trained chain
        max_sentence_words (int): Longest sentence produced by one walk. Walks
            that stall on a word with no successors stop here.
        target_length (int): Default minimum length of text built by generate
        logger (logging.Logger, optional): Logger for generation events
    """

    def __init__(self, chain, max_sentence_words=50, target_length=280, logger=None):
        if chain is None:
            raise ValueError("chain cannot be None")
        if max_sentence_words <= 0:
            raise ValueError("max_sentence_words must be positive")
        if target_length <= 0:
            raise ValueError("target_length must be positive")

        self.chain = chain
        self.max_sentence_words = max_sentence_words
        self.target_length = target_length
        self.logger = logger or logging.getLogger(__name__)

    def generate_sentence(self, start=None):
        """
        Walk the chain once and join the words with spaces.

        Args:
            start (str, optional): Word to start from instead of a random start word

        Returns:
            str: The sentence, or "" if the chain is untrained
        """
        if start is None:
            words = self.chain.walk(max_length=self.max_sentence_words)
        else:
            words = self.chain.walk(start, max_length=self.max_sentence_words)
        return " ".join(words)

    def generate(self, target_length=None):
        """
        Append sentences until the text is at least `target_length` characters.

        Args:
            target_length (int, optional): Minimum length of the text, by default
                the generator's target_length

        Returns:
            str: Sentences separated by ". " and ending with "."

        Raises:
            ValueError: If target_length is not positive
        """
        if target_length is None:
            target_length = self.target_length
        if target_length <= 0:
            raise ValueError("target_length must be positive")

        sentences = []
        text = ""
        while len(text) < target_length:
            sentence = self.generate_sentence()
            if not sentence:
                self.logger.warning("Chain produced an empty sentence, stopping")
                break
            sentences.append(sentence)
            text = ". ".join(sentences) + "."

        self.logger.debug("Generated text", extra={
            "metrics": {"sentences": len(sentences), "length": len(text)}
        })
        return text
