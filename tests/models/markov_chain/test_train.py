import pytest
import pandas as pd
from unittest.mock import MagicMock

from markovwalk.models.markov_chain.markov_chain import MarkovChain
from markovwalk.models.markov_chain.train import CorpusTrainer


@pytest.fixture
def mock_resource_monitor():
    """Create a mock resource monitor for testing"""
    monitor = MagicMock()
    monitor.stop.return_value = 0.5
    monitor.check_memory_health.return_value = (True, {}, None)
    return monitor


@pytest.fixture
def trainer(mock_logger, mock_resource_monitor):
    chain = MarkovChain(logger=mock_logger)
    return CorpusTrainer(chain, logger=mock_logger, resource_monitor=mock_resource_monitor)


def test_requires_chain():
    with pytest.raises(ValueError):
        CorpusTrainer(None)


def test_train_lines_splits_sentences(trainer):
    stats = trainer.train_lines(["A table. A banana? A banana!"])

    assert stats["lines"] == 1
    assert stats["sentences"] == 3
    assert stats["tokens"] == 6
    assert stats["vocabulary"] == 3
    assert stats["start_words"] == 1
    assert stats["elapsed_seconds"] == 0.5

    chain = trainer.chain
    assert chain.start_words.count("a") == 3
    assert chain.get("a").count("table") == 1
    assert chain.get("a").count("banana") == 2


def test_train_lines_skips_empty_lines(trainer):
    stats = trainer.train_lines(["", "   ", "!!!", "hello world"])
    assert stats["lines"] == 4
    assert stats["sentences"] == 1
    assert trainer.chain.start_words.items() == [("hello", 1)]


def test_train_lines_logs_and_monitors(trainer, mock_logger, mock_resource_monitor):
    trainer.train_lines(["hello world"], source="greetings")

    mock_resource_monitor.start.assert_called_once_with("training on greetings")
    mock_resource_monitor.stop.assert_called_once()
    mock_resource_monitor.check_memory_health.assert_called_once()
    mock_logger.info.assert_any_call("Trained on greetings", extra={"metrics": {
        "lines": 1,
        "sentences": 1,
        "tokens": 2,
        "vocabulary": 2,
        "start_words": 1,
        "elapsed_seconds": 0.5,
    }})


def test_train_file(trainer, tmp_path):
    corpus = tmp_path / "tweets.txt"
    corpus.write_text("A table.\nA banana? A banana!\n", encoding="utf-8")

    stats = trainer.train_file(str(corpus))

    assert stats["lines"] == 2
    assert stats["sentences"] == 3
    assert trainer.chain.get("banana").count(None) == 2


def test_train_file_missing(trainer, tmp_path):
    with pytest.raises(ValueError):
        trainer.train_file(str(tmp_path / "missing.txt"))


def test_train_csv(trainer, tmp_path):
    csv_path = tmp_path / "tweets.csv"
    pd.DataFrame({"text": ["A table.", "A banana? A banana!"], "id": [1, 2]}).to_csv(
        csv_path, index=False, header=False)

    stats = trainer.train_csv(str(csv_path))

    assert stats["lines"] == 2
    assert stats["sentences"] == 3
    assert trainer.chain.start_words.count("a") == 3


def test_train_csv_uses_column_reader(trainer, mocker):
    reader = mocker.patch(
        "markovwalk.models.markov_chain.train.read_csv_column",
        return_value=["hello world"],
    )
    trainer.train_csv("dummy_path.csv", column="text", header=0)

    reader.assert_called_once_with("dummy_path.csv", column="text", header=0,
                                   encoding="utf-8")
    assert trainer.chain.get("hello").count("world") == 1


def test_default_collaborators(mocker):
    monitor = mocker.patch("markovwalk.models.markov_chain.train.ResourceMonitor")
    trainer = CorpusTrainer(MarkovChain())
    assert trainer.preprocessor is not None
    assert trainer.resource_monitor is monitor.return_value


def test_train_lines_stops_monitor_when_training_fails(trainer, mock_logger,
                                                       mock_resource_monitor):
    # A non-string CSV cell cannot be cleaned by the preprocessor
    with pytest.raises(TypeError):
        trainer.train_lines(["hello world", 123], source="mixed")

    mock_resource_monitor.start.assert_called_once_with("training on mixed")
    mock_resource_monitor.stop.assert_called_once()
    mock_resource_monitor.check_memory_health.assert_not_called()
    # Lines before the failure stay trained
    assert trainer.chain.get("hello").count("world") == 1


def test_train_csv_defaults_to_configured_column(mock_logger, mock_resource_monitor, mocker):
    reader = mocker.patch(
        "markovwalk.models.markov_chain.train.read_csv_column",
        return_value=["hello world"],
    )
    trainer = CorpusTrainer(MarkovChain(), logger=mock_logger,
                            resource_monitor=mock_resource_monitor,
                            encoding="latin-1", csv_column="text", csv_header=0)
    trainer.train_csv("dummy_path.csv")

    reader.assert_called_once_with("dummy_path.csv", column="text", header=0,
                                   encoding="latin-1")
