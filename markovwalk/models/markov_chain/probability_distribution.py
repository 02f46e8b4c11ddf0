"""
Probability Distribution

A weighted multiset of tokens. Each recorded token keeps a count and a stable
index assigned the first time it is seen. The stable order is what `pick`
walks when it maps a drawn integer onto a token, and what
MarkovChain.fix_distribution relies on to compute replay values.

The end-of-sentence sentinel (None) is an ordinary token here.
"""


class ProbabilityDistribution:
    """
    Frequency table with weighted random selection.

    Attributes:
        total (int): Sum of all recorded counts.

    Example:
        >>> dist = ProbabilityDistribution()
        >>> dist.record("table")
        >>> dist.record("banana")
        >>> dist.record("banana")
        >>> str(dist)
        '{table: 1, banana: 2}'
    """

    def __init__(self):
        # dicts keep insertion order, which is the stable token order
        self._counts = {}
        self._indices = {}
        self.total = 0

    def record(self, token):
        """
        Record one occurrence of a token.

        Args:
            token: Any hashable token, including None for the end sentinel.
        """
        if token not in self._counts:
            self._indices[token] = len(self._indices)
            self._counts[token] = 0
        self._counts[token] += 1
        self.total += 1

    def count(self, token):
        """Return the number of times `token` was recorded, or 0."""
        return self._counts.get(token, 0)

    def index(self, token):
        """
        Return the stable zero-based index of a recorded token.

        Raises:
            ValueError: If the token was never recorded.
        """
        if token not in self._indices:
            raise ValueError(f"token {token!r} was never recorded")
        return self._indices[token]

    def offset(self, token):
        """
        Return the lower bound of the token's cumulative count range.

        A draw equal to this value makes `pick` return `token`.

        Raises:
            ValueError: If the token was never recorded.
        """
        if token not in self._counts:
            raise ValueError(f"token {token!r} was never recorded")
        cumulative = 0
        for candidate, count in self._counts.items():
            if candidate == token:
                return cumulative
            cumulative += count

    def get_total(self):
        return self.total

    def tokens(self):
        return list(self._counts)

    def items(self):
        return list(self._counts.items())

    def pick(self, number_generator):
        """
        Pick a token weighted by its recorded frequency.

        Draws r from `number_generator` in [0, total) and returns the token
        whose cumulative range [before, before + count) contains r.

        Args:
            number_generator (NumberGenerator): Source of the draw.

        Returns:
            The chosen token (possibly None, the end sentinel).

        Raises:
            ValueError: If the distribution is empty, or the draw falls
                outside [0, total).
        """
        if self.total == 0:
            raise ValueError("cannot pick from an empty distribution")

        r = number_generator.next(self.total)
        if r < 0 or r >= self.total:
            raise ValueError(f"draw {r} is outside [0, {self.total})")

        cumulative = 0
        for token, count in self._counts.items():
            cumulative += count
            if r < cumulative:
                return token

    def __len__(self):
        return len(self._counts)

    def __contains__(self, token):
        return token in self._counts

    def __eq__(self, other):
        if not isinstance(other, ProbabilityDistribution):
            return NotImplemented
        return self.items() == other.items()

    def __str__(self):
        pairs = ", ".join(f"{token}: {count}" for token, count in self._counts.items())
        return "{" + pairs + "}"

    def __repr__(self):
        return f"ProbabilityDistribution({self}, total={self.total})"
