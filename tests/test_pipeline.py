import pandas as pd
import pytest

from algoblocks.pipeline import (
    ComponentsConfig,
    ComponentsPipeline,
    PrefixSumConfig,
    PrefixSumPipeline,
    clean_label,
)


def _edges():
    return pd.DataFrame(
        {
            "source": ["alpha", "beta", "delta", "alpha", "  eta ", None],
            "target": ["beta", "gamma", "epsilon", "gamma", "eta", "zeta"],
        }
    )


def test_components_groups_connected_labels():
    pipeline = ComponentsPipeline(ComponentsConfig(verbose=False, use_tqdm=False))
    result = pipeline.run(_edges())

    assert result.components == {
        0: ["alpha", "beta", "gamma"],
        1: ["delta", "epsilon"],
        2: ["eta"],
    }
    df = result.dataframe.set_index("label")
    assert df.loc["gamma", "component_id"] == 0
    assert df.loc["gamma", "component_size"] == 3
    assert df.loc["eta", "component_size"] == 1
    assert "zeta" not in df.index


def test_components_stats():
    result = ComponentsPipeline(ComponentsConfig(verbose=False, use_tqdm=False)).run(_edges())
    stats = result.stats
    assert stats.total_edges == 5
    assert stats.total_labels == 6
    assert stats.merges == 3
    assert stats.redundant_edges == 2
    assert stats.component_count == 3
    assert stats.largest_component == 3


def test_components_raw_labels_keep_whitespace():
    config = ComponentsConfig(verbose=False, use_tqdm=False, normalize_labels=False)
    result = ComponentsPipeline(config).run(_edges())
    assert ["  eta ", "eta"] in result.components.values()

    frame = pd.DataFrame({"source": ["   ", "a"], "target": ["b", "c"]})
    result = ComponentsPipeline(config).run(frame)
    assert result.components == {0: ["a", "c"]}
    assert result.stats.total_edges == 1


def test_components_missing_column():
    with pytest.raises(KeyError):
        ComponentsPipeline(ComponentsConfig(left_column="from", verbose=False)).run(_edges())


def test_components_empty_frame():
    frame = pd.DataFrame({"source": [], "target": []})
    result = ComponentsPipeline(ComponentsConfig(verbose=False)).run(frame)
    assert result.components == {}
    assert result.stats.largest_component == 0
    assert len(result.dataframe) == 0


def test_components_prints_progress(capsys):
    ComponentsPipeline(ComponentsConfig(use_tqdm=False)).run(_edges())
    out = capsys.readouterr().out
    assert "Components found: 3" in out


def test_clean_label_repairs_mojibake():
    assert clean_label("cafÃ©  bar") == "café bar"
    assert clean_label(None) == ""
    assert clean_label(float("nan")) == ""


def test_prefix_sums_column():
    frame = pd.DataFrame({"value": [1, 3, 4, 8, 6, 1, 4, 2]})
    result = PrefixSumPipeline(PrefixSumConfig(verbose=False)).run(frame)
    assert result["prefix_sum"].tolist() == [1, 4, 8, 16, 22, 23, 27, 29]
    assert "prefix_sum" not in frame.columns


def test_prefix_sums_parse_text_and_blanks():
    frame = pd.DataFrame({"amount": ["2", "", " 5 ", None]})
    config = PrefixSumConfig(value_column="amount", output_column="running", verbose=False)
    result = PrefixSumPipeline(config).run(frame)
    assert result["running"].tolist() == [2, 2, 7, 7]


def test_prefix_sums_reject_non_numeric():
    frame = pd.DataFrame({"value": ["1", "two"]})
    with pytest.raises(ValueError):
        PrefixSumPipeline(PrefixSumConfig(verbose=False)).run(frame)
