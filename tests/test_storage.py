from pathlib import Path

import pytest

from redirect_resolver.storage import ResultRow, read_input_urls, write_output_csv


def test_read_input_urls_accepts_website_column(tmp_path: Path):
    csv_path = tmp_path / "input.csv"
    csv_path.write_text("id,Website\n1,https://example.com\n2,\n3, https://example.org/a \n")
    assert read_input_urls(csv_path) == ["https://example.com", "https://example.org/a"]


def test_read_input_urls_requires_url_column(tmp_path: Path):
    csv_path = tmp_path / "input.csv"
    csv_path.write_text("id,name\n1,Test\n")
    with pytest.raises(ValueError):
        read_input_urls(csv_path)


def test_write_output_csv(tmp_path: Path):
    output_path = tmp_path / "out.csv"
    row = ResultRow(url="https://example.com", final_url="https://www.example.com/", hops=["meta-refresh:https://www.example.com/"])
    write_output_csv(output_path, [row])
    content = output_path.read_text().splitlines()
    assert content[0].startswith("url,final_url,redirected,hops")
    assert ",true," in content[1]
