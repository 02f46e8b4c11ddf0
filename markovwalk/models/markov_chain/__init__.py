from markovwalk.models.markov_chain.number_generator import (
    ListNumberGenerator,
    NumberGenerator,
    NumberGeneratorExhaustedError,
    RandomNumberGenerator,
)
from markovwalk.models.markov_chain.probability_distribution import ProbabilityDistribution
from markovwalk.models.markov_chain.markov_chain import MarkovChain

__all__ = [
    "ListNumberGenerator",
    "MarkovChain",
    "NumberGenerator",
    "NumberGeneratorExhaustedError",
    "ProbabilityDistribution",
    "RandomNumberGenerator",
]
