import json

import matplotlib.pyplot as plt
from click.testing import CliRunner

from contrast_color import ContrastColorPicker, ContrastConfig
from contrast_color.cli import main
from contrast_color.preview import render_preview


def invoke(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


def test_prints_hex_answer():
    result = invoke("#ff00ff", "--candidates", "black,white")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "#ff00ff -> #000000"


def test_names_flag():
    result = invoke("#ff00ff", "white", "--candidates", "black,white", "--names")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["#ff00ff -> black", "white -> black"]


def test_palette_option():
    result = invoke("white", "--palette", "material")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "white -> #000000"


def test_distances_table():
    result = invoke("#ff00ff", "--candidates", "black,white", "--distances")
    assert result.exit_code == 0, result.output
    assert "CIEDE2000 distance from #ff00ff" in result.output
    table = result.output.split("CIEDE2000 distance from #ff00ff", 1)[1]
    assert table.index("black") < table.index("white")


def test_invalid_color_exits_with_error():
    result = invoke("notacolor")
    assert result.exit_code == 1
    assert "Cannot resolve color 'notacolor'" in result.output


def test_invalid_candidate_exits_with_error():
    result = invoke("white", "--candidates", "black,ultraviolet")
    assert result.exit_code == 1
    assert "ultraviolet" in result.output


def test_bad_environment_exits_with_error():
    result = invoke("white", env={"CONTRAST_COLOR_HEX_OUTPUT": "maybe"})
    assert result.exit_code == 1
    assert "CONTRAST_COLOR_HEX_OUTPUT" in result.output


def test_zero_cache_size_in_environment_exits_with_error():
    result = invoke("white", env={"CONTRAST_COLOR_CACHE_SIZE": "0"})
    assert result.exit_code == 1
    assert "result_cache_size must be a positive int" in result.output
    assert not isinstance(result.exception, ValueError)


def test_candidates_environment_list_is_used():
    result = invoke("#ff00ff", env={"CONTRAST_COLOR_CANDIDATES": "black,white"})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "#ff00ff -> #000000"


def test_cache_file_round_trip(tmp_path):
    cache_file = tmp_path / "cache.json"
    result = invoke("#ff00ff", "--candidates", "black,white", "--cache-file", str(cache_file))
    assert result.exit_code == 0, result.output
    assert json.loads(cache_file.read_text()) == {"#ff00ff": "#000000"}


def test_cache_file_seeds_answers(tmp_path):
    cache_file = tmp_path / "cache.json"
    cache_file.write_text(json.dumps({"navy": "#123456"}))
    result = invoke("navy", "--cache-file", str(cache_file))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "navy -> #123456"


def test_cache_file_must_be_object(tmp_path):
    cache_file = tmp_path / "cache.json"
    cache_file.write_text("[1, 2]")
    result = invoke("navy", "--cache-file", str(cache_file))
    assert result.exit_code == 1
    assert "JSON object" in result.output


def test_cache_file_with_invalid_utf8_exits_with_error(tmp_path):
    cache_file = tmp_path / "cache.json"
    cache_file.write_bytes(b"\xff\xfe\xfa")
    result = invoke("navy", "--cache-file", str(cache_file))
    assert result.exit_code == 1
    assert "not valid UTF-8 JSON" in result.output


def test_distances_marks_cached_answer(tmp_path):
    cache_file = tmp_path / "cache.json"
    cache_file.write_text(json.dumps({"navy": "#123456"}))
    result = invoke("navy", "--candidates", "black,white", "--distances",
                    "--cache-file", str(cache_file))
    assert result.exit_code == 0, result.output
    assert result.output.startswith("navy -> #123456")
    assert "(cached) #123456 differs from the current winner #ffffff" in result.output


def test_distances_without_cache_has_no_note():
    result = invoke("navy", "--candidates", "black,white", "--distances")
    assert result.exit_code == 0, result.output
    assert "(cached)" not in result.output


def test_preview_option_writes_png(tmp_path):
    out = tmp_path / "preview.png"
    result = invoke("#ff00ff", "navy", "--preview", str(out))
    assert result.exit_code == 0, result.output
    assert out.exists() and out.stat().st_size > 0
    assert "Preview saved to" in result.output


def test_render_preview_draws_one_swatch_per_color():
    picker = ContrastColorPicker(ContrastConfig(candidates=("black", "white")))
    fig = render_preview(picker, ["#ff00ff", "black", "gold"])
    try:
        ax = fig.axes[0]
        assert len(ax.patches) == 3
        labels = [text.get_text() for text in ax.texts]
        assert "#000000" in labels and "#ffffff" in labels
    finally:
        plt.close(fig)
    assert len(picker.results) == 3
