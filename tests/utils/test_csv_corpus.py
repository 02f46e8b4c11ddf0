import pytest
import pandas as pd

from markovwalk.utils.csv_corpus import read_csv_column


def test_reads_first_column_without_header(tmp_path):
    path = tmp_path / "tweets.csv"
    path.write_text("Hello world,positive\nThis is a test,neutral\n")
    assert read_csv_column(str(path)) == ["Hello world", "This is a test"]


def test_reads_named_column_with_header(tmp_path):
    path = tmp_path / "tweets.csv"
    pd.DataFrame({"id": [1, 2, 3], "text": ["one", None, "three"]}).to_csv(path, index=False)
    assert read_csv_column(str(path), column="text", header=0) == ["one", "three"]


def test_reads_column_by_position(tmp_path):
    path = tmp_path / "tweets.csv"
    path.write_text("1,first tweet\n2,second tweet\n")
    assert read_csv_column(str(path), column=1) == ["first tweet", "second tweet"]


def test_empty_dataframe(mocker):
    mocker.patch("pandas.read_csv", return_value=pd.DataFrame(columns=["column1"]))
    assert read_csv_column("dummy_path.csv") == []


def test_read_error_is_raised(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv_column(str(tmp_path / "missing.csv"))
