import logging

import pytest

from markovwalk.models.markov_chain.generate import TextGenerator
from markovwalk.models.markov_chain.markov_chain import MarkovChain
from markovwalk.models.markov_chain.number_generator import RandomNumberGenerator
from markovwalk.models.markov_chain.train import CorpusTrainer
from markovwalk.utils.config_loader import (
    build_chain,
    build_generator,
    build_logger,
    build_trainer,
    get_setting,
    load_config,
)


def test_load_default_development_config():
    config = load_config()
    assert config["environment"] == "development"
    assert get_setting(config, "logging.level") == "DEBUG"
    assert get_setting(config, "corpus.encoding") == "utf-8"
    assert get_setting(config, "random.seed") is None


def test_load_test_config_merges_overrides():
    config = load_config("test")
    assert get_setting(config, "random.seed") == 42
    assert get_setting(config, "logging.level") == "WARNING"
    # Untouched keys come from the defaults
    assert get_setting(config, "logging.console_json") is True
    assert get_setting(config, "corpus.csv_column") == 0
    assert get_setting(config, "generation.max_sentence_words") == 20


def test_unknown_environment():
    with pytest.raises(ValueError, match="Unknown environment"):
        load_config("production")


def test_missing_default_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config("test", config_dir=str(tmp_path))


def test_custom_config_dir_without_environment_file(tmp_path):
    (tmp_path / "markov_chain.yaml").write_text("random:\n  seed: 5\n")
    config = load_config("test", config_dir=str(tmp_path))
    assert config == {"random": {"seed": 5}, "environment": "test"}


def test_empty_config_file(tmp_path):
    (tmp_path / "markov_chain.yaml").write_text("")
    assert load_config("development", config_dir=str(tmp_path)) == {
        "environment": "development"}


def test_get_setting_defaults():
    config = {"a": {"b": 1}}
    assert get_setting(config, "a.b") == 1
    assert get_setting(config, "a.c", "fallback") == "fallback"
    assert get_setting(config, "a.b.c") is None


def test_build_chain_uses_seed():
    chain = build_chain(load_config("test"))
    assert isinstance(chain, MarkovChain)
    assert isinstance(chain.number_generator, RandomNumberGenerator)
    assert chain.number_generator.seed == 42


def test_build_logger():
    logger = build_logger(load_config("test"), name="markovwalk.test.build_logger")
    try:
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING
    finally:
        logger.handlers.clear()


def test_build_trainer_reads_corpus_section():
    config = load_config("test")
    config["corpus"]["encoding"] = "latin-1"
    config["corpus"]["csv_column"] = "text"
    config["corpus"]["csv_header"] = 0
    chain = build_chain(config)

    trainer = build_trainer(config, chain)

    assert isinstance(trainer, CorpusTrainer)
    assert trainer.chain is chain
    assert trainer.encoding == "latin-1"
    assert trainer.csv_column == "text"
    assert trainer.csv_header == 0


def test_build_trainer_defaults():
    trainer = build_trainer({}, MarkovChain())
    assert trainer.encoding == "utf-8"
    assert trainer.csv_column == 0
    assert trainer.csv_header is None


def test_build_generator_reads_generation_section():
    config = load_config("test")
    chain = build_chain(config)
    chain.train(["a", "table"])

    generator = build_generator(config, chain)

    assert isinstance(generator, TextGenerator)
    assert generator.max_sentence_words == 20
    assert generator.target_length == 140
    assert len(generator.generate()) >= 140


def test_build_generator_defaults():
    generator = build_generator({}, MarkovChain())
    assert generator.max_sentence_words == 50
    assert generator.target_length == 280
