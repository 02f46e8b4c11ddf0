"""
CSV Corpus

Reads tweet datasets stored as CSV files, one tweet per row.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def read_csv_column(csv_file_path, column=0, header=None, encoding="UTF-8"):
    """
    Read one column of a CSV file as a list of strings.

    Tweet datasets keep the text in a single column; missing cells are dropped.

    Args:
        csv_file_path (str): The path to the CSV file.
        column (int or str): Column position, or column name when the file has a header.
        header (int or None): Row number to use as the column names, or None if the CSV has no header.
        encoding (str): Encoding of the CSV file.

    Returns:
        list of str: The non-empty cells of the column, in file order.

    Raises:
        Exception: If there is an error reading or processing the CSV file.
    """
    try:
        df = pd.read_csv(csv_file_path, encoding=encoding, header=header)
    except Exception as e:
        logger.error(f"Error processing CSV file at {csv_file_path}: {e}")
        raise

    if df.empty:
        return []

    if isinstance(column, int):
        series = df.iloc[:, column]
    else:
        series = df[column]
    return series.dropna().astype(str).tolist()
