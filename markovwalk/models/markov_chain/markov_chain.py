"""
Markov Chain

A first-order Markov chain over words. Training records, for every word, how
often each other word follows it, plus how often each word starts a sentence.
Generation is a random walk: the chain itself is an iterator whose `reset`
picks a start word and whose `__next__` returns the current word and moves to
a successor chosen according to the recorded frequencies.

Training example:

    The sentences [["a", "table"], ["a", "banana"], ["a", "banana"]] produce

        "a"      -> {"table": 1, "banana": 2}
        "table"  -> {None: 1}
        "banana" -> {None: 2}

    and start words {"a": 3}. None marks the end of a sentence.

Generation example:

    >>> chain.reset()                 # current word becomes "a"
    >>> next(chain)                   # "a"
    'a'
    >>> next(chain)                   # "table" (1/3) or "banana" (2/3)
    'banana'
    >>> chain.has_next()              # banana only ever ended a sentence
    False

All random choices come from the chain's NumberGenerator. `fix_distribution`
swaps it for a ListNumberGenerator so a walk reproduces a given sequence.
"""

import logging

from markovwalk.models.markov_chain.number_generator import (
    ListNumberGenerator,
    NumberGenerator,
    RandomNumberGenerator,
)
from markovwalk.models.markov_chain.probability_distribution import ProbabilityDistribution

# Marks a reset() call without an explicit start word
_RANDOM_START = object()


class MarkovChain:
    """
    Bigram Markov chain with an iterator-style random walk.

    Args:
        number_generator (NumberGenerator, optional): Source of every random
            choice. Defaults to an unseeded RandomNumberGenerator.
        logger (logging.Logger, optional): Logger for training and replay
            events. Defaults to the module logger.

    Raises:
        ValueError: If number_generator is not a NumberGenerator.
    """

    def __init__(self, number_generator=None, logger=None):
        if number_generator is None:
            number_generator = RandomNumberGenerator()
        if not isinstance(number_generator, NumberGenerator):
            raise ValueError("number_generator must be a NumberGenerator instance")

        self.logger = logger or logging.getLogger(__name__)
        self.number_generator = number_generator
        self.chain = {}
        self.start_words = ProbabilityDistribution()
        self.current = None
        self.reset()

    def add_bigram(self, first, second):
        """
        Record that `second` followed `first`.

        Args:
            first (str): Preceding word, must not be None.
            second (str or None): Following word, or None for end of sentence.

        Raises:
            ValueError: If first is None.
        """
        if first is None:
            raise ValueError("first word of a bigram cannot be None")

        distribution = self.chain.get(first)
        if distribution is None:
            distribution = ProbabilityDistribution()
            self.chain[first] = distribution
        distribution.record(second)

    def train(self, sentence):
        """
        Add one sentence of training data.

        The first word is recorded as a start word, each adjacent pair as a
        bigram, and the last word is paired with None so the chain learns it
        can end a sentence. Empty sentences are ignored.

        Args:
            sentence (iterable of str): The words of one sentence. It is
                consumed exactly once.

        Raises:
            ValueError: If sentence is None or contains None. Nothing is
                recorded in that case.
        """
        if sentence is None:
            raise ValueError("sentence cannot be None")

        words = list(sentence)
        if not words:
            return
        if None in words:
            raise ValueError("sentence cannot contain None")

        self.start_words.record(words[0])
        for previous, word in zip(words, words[1:]):
            self.add_bigram(previous, word)
        self.add_bigram(words[-1], None)

        self.logger.debug("Trained sentence", extra={
            "metrics": {"words": len(words), "vocabulary": len(self.chain)}
        })

    def get(self, token):
        """Return the successor distribution of `token`, or None if unseen."""
        return self.chain.get(token)

    def reset(self, start=_RANDOM_START):
        """
        Start a new walk.

        With no argument a start word is picked from the start-word
        distribution (or the walk is left empty if nothing was trained). With
        an explicit word the walk begins there; the word need not be part of
        the chain. reset(None) empties the walk.

        The first call to next() after a reset returns the start word.
        """
        if start is _RANDOM_START:
            if self.start_words.get_total() == 0:
                start = None
            else:
                start = self.start_words.pick(self.number_generator)
        self.current = start

    def has_next(self):
        return self.current is not None

    def __iter__(self):
        return self

    def __next__(self):
        """
        Return the current word and advance the walk.

        The successor is picked from the current word's distribution and may
        be None, which ends the walk. A word that was never trained as a
        predecessor has no distribution; the walk then stays on that word.

        Raises:
            StopIteration: If the walk is exhausted.
        """
        if not self.has_next():
            raise StopIteration

        word = self.current
        distribution = self.chain.get(word)
        if distribution is not None:
            self.current = distribution.pick(self.number_generator)
        return word

    def walk(self, start=_RANDOM_START, max_length=None):
        """
        Reset and collect a whole walk.

        Args:
            start (str, optional): Explicit start word. Omit to pick one.
            max_length (int, optional): Stop after this many words, which
                bounds walks that stall on an untrained word.

        Returns:
            list: The words of the walk, without the end sentinel.
        """
        self.reset(start)
        words = []
        while self.has_next():
            if max_length is not None and len(words) >= max_length:
                self.logger.warning("Walk stopped at max_length", extra={
                    "metrics": {"max_length": max_length, "current": self.current}
                })
                break
            words.append(next(self))
        return words

    def fix_distribution(self, words, record_start=False):
        """
        Force subsequent walks to produce `words`.

        Computes, for every transition in `words`, the draw that makes the
        relevant distribution pick the required word, and replaces the number
        generator with a ListNumberGenerator over those draws. The draw for a
        word is the lower bound of its cumulative count range, so replay is
        exact whatever the counts are.

        None inside `words` marks a sentence end; the word after it is drawn
        from the start words, as the next reset() would. A sentence boundary
        is also implied when a word cannot follow its predecessor but the
        predecessor can end a sentence and the word can start one. If the
        last word can end a sentence, the draw ending it is appended.

        Args:
            words (list): Ordered words the walk should produce. Not modified.
            record_start (bool): Whether to include the draw for the first
                word, which is consumed by a following reset() with no
                argument. Leave False when the walk will be started with
                reset(words[0]).

        Raises:
            ValueError: If words is empty, the first word is not a start
                word, or a word cannot follow the one before it.
        """
        if words is None or len(words) < 1:
            raise ValueError("must have words in order to fix distribution")

        words = list(words)
        current_word = words[0]
        if current_word is None or self.start_words.count(current_word) < 1:
            raise ValueError(f"first word {current_word!r} not present in start words")

        draws = []
        if record_start:
            draws.append(self.start_words.offset(current_word))

        for next_word in words[1:]:
            if current_word is None:
                if self.start_words.count(next_word) < 1:
                    raise ValueError(
                        f"word {next_word!r} not present in start words")
                draws.append(self.start_words.offset(next_word))
            else:
                distribution = self.chain.get(current_word)
                if distribution is not None and distribution.count(next_word) >= 1:
                    draws.append(distribution.offset(next_word))
                elif (distribution is not None and None in distribution
                        and self.start_words.count(next_word) >= 1):
                    draws.append(distribution.offset(None))
                    draws.append(self.start_words.offset(next_word))
                else:
                    raise ValueError(
                        f"word {next_word!r} not found as a child of word {current_word!r}")
            current_word = next_word

        if current_word is not None:
            distribution = self.chain.get(current_word)
            if distribution is not None and None in distribution:
                draws.append(distribution.offset(None))

        self.number_generator = ListNumberGenerator(draws)
        self.logger.info("Fixed distribution", extra={
            "metrics": {"words": len(words), "draws": len(draws), "record_start": record_start}
        })

    def __str__(self):
        return "".join(
            f"{word}: {self.chain[word]}\n" for word in sorted(self.chain)
        )
