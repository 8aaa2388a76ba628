import pytest
from matplotlib import colors as mcolors

from memplot.models.extraction_options import ExtractionOptions
from memplot.plot.chart import build_chart, save_chart


@pytest.fixture
def collection(make_collection):
    return make_collection([(1024, 4096), (2048, 8192), (3072, 8192)], pid=1234)


def test_chart_labels_and_grid(collection):
    fig = build_chart(collection, ExtractionOptions())
    ax = fig.axes[0]

    assert ax.get_title() == "Memory Plot of PID 1234"
    assert ax.get_xlabel() == "Time (Seconds)"
    assert ax.get_ylabel() == "KiloBytes"
    assert all(line.get_visible() for line in ax.xaxis.get_gridlines())
    assert all(line.get_visible() for line in ax.yaxis.get_gridlines())


def test_no_metrics_gives_empty_chart(collection):
    fig = build_chart(collection, ExtractionOptions(plot_rss=False, plot_vsz=False))
    ax = fig.axes[0]

    assert ax.get_lines() == []
    assert ax.get_legend() is None
    assert all(line.get_visible() for line in ax.xaxis.get_gridlines())


def test_both_metrics_draw_rss_then_vsz(collection):
    fig = build_chart(collection, ExtractionOptions(plot_rss=True, plot_vsz=True))
    ax = fig.axes[0]

    lines = ax.get_lines()
    assert [line.get_label() for line in lines] == ["RSS", "VSZ"]
    assert [mcolors.to_hex(line.get_color()) for line in lines] == ["#000000", "#0000ff"]
    assert [line.get_linewidth() for line in lines] == [1, 1]
    assert [text.get_text() for text in ax.get_legend().get_texts()] == ["RSS", "VSZ"]


def test_line_data_matches_series(collection):
    fig = build_chart(collection, ExtractionOptions(plot_rss=True, plot_vsz=False))
    (line,) = fig.axes[0].get_lines()

    assert list(line.get_xdata()) == [0.0, 0.5, 1.0]
    assert list(line.get_ydata()) == [1.0, 2.0, 3.0]
    assert [t.get_text() for t in fig.axes[0].get_legend().get_texts()] == ["RSS"]


def test_vsz_only(collection):
    fig = build_chart(collection, ExtractionOptions(plot_rss=False, plot_vsz=True))
    (line,) = fig.axes[0].get_lines()

    assert line.get_label() == "VSZ"
    assert mcolors.to_hex(line.get_color()) == "#0000ff"
    assert list(line.get_ydata()) == [4.0, 8.0, 8.0]


def test_empty_collection_still_charts(make_collection):
    fig = build_chart(make_collection([]), ExtractionOptions())

    assert [len(line.get_xdata()) for line in fig.axes[0].get_lines()] == [0, 0]


@pytest.mark.parametrize("name", ["chart.png", "chart.svg", "chart.pdf"])
def test_save_chart_infers_format(collection, tmp_path, name):
    fig = build_chart(collection, ExtractionOptions())
    output = tmp_path / name

    save_chart(fig, 6, 3, output, dpi=50)

    assert output.stat().st_size > 0
    assert tuple(fig.get_size_inches()) == (6, 3)


def test_save_chart_unknown_extension_fails(collection, tmp_path):
    fig = build_chart(collection, ExtractionOptions())

    with pytest.raises(ValueError):
        save_chart(fig, 6, 3, tmp_path / "chart.notaformat")


def test_save_chart_missing_directory_fails(collection, tmp_path):
    fig = build_chart(collection, ExtractionOptions())

    with pytest.raises(FileNotFoundError):
        save_chart(fig, 6, 3, tmp_path / "missing" / "chart.png")
