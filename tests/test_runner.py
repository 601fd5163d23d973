import pandas as pd

from algoblocks.pipeline import ComponentsConfig, PrefixSumConfig
from algoblocks.runner import components_file, prefix_sums_file


def test_components_file_round_trip(tmp_path):
    source = tmp_path / "edges.csv"
    source.write_text("source,target\na,b\nc,d\nb,c\ne,f\n")
    output = tmp_path / "nodes.csv"

    result = components_file(source, output, ComponentsConfig(verbose=False, use_tqdm=False))

    assert result is not None
    written = pd.read_csv(output)
    assert written.columns.tolist() == ["label", "component_id", "component_size"]
    assert written["component_size"].tolist() == [4, 4, 4, 4, 2, 2]


def test_components_file_missing_input(tmp_path, capsys):
    assert components_file(tmp_path / "absent.csv", tmp_path / "out.csv") is None
    assert "ERROR: Input file not found" in capsys.readouterr().out


def test_components_file_unsupported_format(tmp_path, capsys):
    source = tmp_path / "edges.json"
    source.write_text("{}")
    assert components_file(source, tmp_path / "out.csv") is None
    assert "Unsupported file format" in capsys.readouterr().out


def test_components_file_missing_column(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    source.write_text("from,to\na,b\n")
    assert components_file(source, tmp_path / "out.csv") is None
    assert "Column 'source' not found" in capsys.readouterr().out


def test_components_file_bad_output_suffix(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    source.write_text("source,target\na,b\n")
    config = ComponentsConfig(verbose=False, use_tqdm=False)
    assert components_file(source, tmp_path / "out.parquet", config) is None
    assert "Unsupported output file format" in capsys.readouterr().out


def test_prefix_sums_file(tmp_path):
    source = tmp_path / "values.csv"
    source.write_text("day,value\nmon,1\ntue,3\nwed,4\n")
    output = tmp_path / "totals.csv"

    frame = prefix_sums_file(source, output, PrefixSumConfig(verbose=False))

    assert frame is not None
    assert pd.read_csv(output)["prefix_sum"].tolist() == [1, 4, 8]


def test_prefix_sums_file_non_numeric(tmp_path, capsys):
    source = tmp_path / "values.csv"
    source.write_text("value\n1\nmany\n")
    assert prefix_sums_file(source, tmp_path / "out.csv", PrefixSumConfig(verbose=False)) is None
    assert "non-numeric" in capsys.readouterr().out


def test_components_file_empty_csv(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    source.write_text("")
    assert components_file(source, tmp_path / "out.csv") is None
    out = capsys.readouterr().out
    assert "ERROR: Could not parse" in out
    assert "Unsupported file format" not in out


def test_components_file_rejects_xls(tmp_path, capsys):
    source = tmp_path / "edges.xls"
    source.write_bytes(b"")
    assert components_file(source, tmp_path / "out.csv") is None
    assert "Unsupported file format" in capsys.readouterr().out
