"""
Configuration Loader

Settings live in YAML files under markovwalk/configs:

    - markov_chain.yaml: defaults shared by every environment
    - markov_chain_<environment>.yaml: overrides for one environment

`load_config` reads the defaults and merges the environment file on top.
"""

import copy
import logging
import os

import yaml

from markovwalk.models.markov_chain.generate import TextGenerator
from markovwalk.models.markov_chain.markov_chain import MarkovChain
from markovwalk.models.markov_chain.number_generator import RandomNumberGenerator
from markovwalk.models.markov_chain.train import CorpusTrainer
from markovwalk.utils.loggers.json_logger import get_logger

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "configs"))
DEFAULT_CONFIG_NAME = "markov_chain.yaml"
ENVIRONMENTS = ("development", "test")


def _read_yaml(config_path):
    with open(config_path, "r") as f:
        data = yaml.safe_load(f)
    return data or {}


def _merge(base, overrides):
    """Recursively merge `overrides` into a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(environment="development", config_dir=None):
    """
    Load settings for an environment.

    Args:
        environment (str): Which environment to use ('development' or 'test')
        config_dir (str, optional): Directory holding the YAML files

    Returns:
        dict: The merged configuration

    Raises:
        ValueError: If the environment is unknown
        FileNotFoundError: If the default configuration file is missing
    """
    if environment not in ENVIRONMENTS:
        raise ValueError(
            f"Unknown environment '{environment}'. Available: {', '.join(ENVIRONMENTS)}")

    config_dir = config_dir or CONFIG_DIR
    default_path = os.path.join(config_dir, DEFAULT_CONFIG_NAME)
    if not os.path.exists(default_path):
        raise FileNotFoundError(f"Missing configuration file: {default_path}")

    config = _read_yaml(default_path)
    logger.debug(f"Loaded configuration from {default_path}")

    env_path = os.path.join(config_dir, f"markov_chain_{environment}.yaml")
    if os.path.exists(env_path):
        config = _merge(config, _read_yaml(env_path))
        logger.debug(f"Loaded {environment} overrides from {env_path}")

    config["environment"] = environment
    return config


def get_setting(config, path, default=None):
    """Get a nested setting by dotted path, e.g. 'random.seed'."""
    current = config
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def build_logger(config, name="markovwalk"):
    """Create the project logger described by the 'logging' section."""
    return get_logger(
        name,
        log_file=get_setting(config, "logging.log_file"),
        console_json=get_setting(config, "logging.console_json", True),
        level=str(get_setting(config, "logging.level", "INFO")).upper(),
    )


def build_chain(config, logger=None):
    """Create an untrained MarkovChain seeded from the 'random' section."""
    seed = get_setting(config, "random.seed")
    return MarkovChain(RandomNumberGenerator(seed), logger=logger)


def build_trainer(config, chain, logger=None):
    """Create a CorpusTrainer for `chain` using the 'corpus' section."""
    return CorpusTrainer(
        chain,
        logger=logger,
        encoding=get_setting(config, "corpus.encoding", "utf-8"),
        csv_column=get_setting(config, "corpus.csv_column", 0),
        csv_header=get_setting(config, "corpus.csv_header"),
    )


def build_generator(config, chain, logger=None):
    """Create a TextGenerator for `chain` using the 'generation' section."""
    return TextGenerator(
        chain,
        max_sentence_words=get_setting(config, "generation.max_sentence_words", 50),
        target_length=get_setting(config, "generation.target_length", 280),
        logger=logger,
    )
