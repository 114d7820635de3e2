"""End-to-end use of the top-level chartstats API, as a chart would call it."""

import pytest

import chartstats
from chartstats import (
    ChartDataset,
    EmptyInputError,
    build_box_summaries,
    compute_grouped_histogram,
    prepare,
    quantile,
)
from chartstats.stats import samples_by_label


def test_errors_share_base_class() -> None:
    for err in (chartstats.EmptyInputError, chartstats.InvalidQuantileError, chartstats.InvalidDomainError):
        assert issubclass(err, chartstats.ChartStatsError)
        assert issubclass(err, ValueError)


def test_boxplot_and_violin_from_datasets() -> None:
    datasets = [
        ChartDataset.from_pairs("a", enumerate([1, 2, 2, 3, 100]), unit="ms"),
        ChartDataset.from_pairs("b", enumerate(range(1, 11)), unit="ms"),
    ]
    boxes = build_box_summaries(datasets)
    assert boxes["a"].outliers == [100.0]
    assert boxes["b"].median == pytest.approx(5.5)

    grouped = compute_grouped_histogram(samples_by_label(datasets), 4)
    assert grouped["a"].edges == grouped["b"].edges
    assert grouped["a"].domain == (1.0, 100.0)


def test_quantile_of_prepared_sample() -> None:
    sample = prepare(ChartDataset.from_pairs("x", [("q", 42)]).data)
    assert quantile(sample, 0.37) == 42.0


def test_empty_dataset_is_caller_error() -> None:
    with pytest.raises(EmptyInputError):
        build_box_summaries([ChartDataset("empty")])
