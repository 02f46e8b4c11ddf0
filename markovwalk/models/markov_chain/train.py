"""
Markov Chain Corpus Training

Feeds text corpora into a MarkovChain. Each line of input is cleaned and split
into sentences by the TextPreprocessor, and every sentence becomes one call to
MarkovChain.train. Progress and resource usage are logged as JSON metrics.
"""

import logging

from markovwalk.data_preprocessing.text_preprocessor import TextPreprocessor
from markovwalk.utils.csv_corpus import read_csv_column
from markovwalk.utils.file_line_iterator import FileLineIterator
from markovwalk.utils.system_monitoring import ResourceMonitor


class CorpusTrainer:
    """
    Trains a MarkovChain from lines of raw text.

    Args:
        chain (MarkovChain): The chain to train
        preprocessor (TextPreprocessor, optional): Sentence splitter and tokenizer
        logger (logging.Logger, optional): Logger for training progress
        resource_monitor (ResourceMonitor, optional): Source of resource metrics
        encoding (str): Encoding used when reading text and CSV files
        csv_column (int or str): Default column read by train_csv
        csv_header (int or None): Default header row used by train_csv

    Raises:
        ValueError: If chain is None
    """

    def __init__(self, chain, preprocessor=None, logger=None, resource_monitor=None,
                 encoding="utf-8", csv_column=0, csv_header=None):
        if chain is None:
            raise ValueError("chain cannot be None")

        self.chain = chain
        self.preprocessor = preprocessor or TextPreprocessor()
        self.logger = logger or logging.getLogger(__name__)
        self.resource_monitor = resource_monitor or ResourceMonitor(logger=self.logger)
        self.encoding = encoding
        self.csv_column = csv_column
        self.csv_header = csv_header

    def train_lines(self, lines, source="lines"):
        """
        Train the chain on every sentence found in `lines`.

        Args:
            lines (iterable of str): Raw text lines, consumed once
            source (str): Name of the corpus, used in log records

        Returns:
            dict: Training statistics
        """
        self.resource_monitor.start(f"training on {source}")

        stats = {"lines": 0, "sentences": 0, "tokens": 0}
        try:
            for line in lines:
                stats["lines"] += 1
                for sentence in self.preprocessor.sentences(line):
                    self.chain.train(sentence)
                    stats["sentences"] += 1
                    stats["tokens"] += len(sentence)
        finally:
            stats["elapsed_seconds"] = self.resource_monitor.stop()

        stats["vocabulary"] = len(self.chain.chain)
        stats["start_words"] = len(self.chain.start_words)

        self.resource_monitor.check_memory_health()
        self.logger.info(f"Trained on {source}", extra={"metrics": stats})
        return stats

    def train_file(self, file_path):
        """Train on a plain text file, one tweet or paragraph per line."""
        with FileLineIterator(file_path, encoding=self.encoding, logger=self.logger) as lines:
            return self.train_lines(lines, source=file_path)

    def train_csv(self, csv_file_path, column=None, header=None):
        """Train on one column of a CSV file, by default the trainer's csv_column."""
        if column is None:
            column = self.csv_column
            header = self.csv_header
        texts = read_csv_column(csv_file_path, column=column, header=header,
                                encoding=self.encoding)
        return self.train_lines(texts, source=csv_file_path)
