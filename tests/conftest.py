import pytest
from unittest.mock import MagicMock

from markovwalk.models.markov_chain.markov_chain import MarkovChain


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def trained_chain(mock_logger):
    """Chain trained on the sentences of 'a table. A banana? A banana!'"""
    chain = MarkovChain(logger=mock_logger)
    chain.train(["a", "table"])
    chain.train(["a", "banana"])
    chain.train(["a", "banana"])
    return chain
