"""
End-to-end tests for the sort_colors command line.
"""

import numpy as np
import pytest
from PIL import Image

from buckets import HUE_BUCKETS, FilterRange
from sort_colors import main, run
from swatches import swatch_from_hex


EXAMPLE_LINES = ["Cherry,#FF0000", "Sky,#3399FF", "Leaf,#339933"]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_swatches(directory, lines, name="colors.txt"):
    path = directory / name
    path.write_text('\n'.join(lines) + '\n')
    return path


def images_in(directory):
    return sorted(p.name for p in directory.glob("*.png"))


class TestMain:

    def test_example_input(self, workdir, capsys):
        write_swatches(workdir, EXAMPLE_LINES)
        main(["--color-swatches", "colors.txt"])

        assert images_in(workdir) == ["Cyan-Blue.png", "Green.png", "Red.png"]
        assert capsys.readouterr().out == (
            "Red\n000.000, 1.000, 0.500: Cherry\n\n"
            "Green\n120.000, 0.500, 0.400: Leaf\n\n"
            "Cyan-Blue\n210.000, 1.000, 0.600: Sky\n\n"
        )

    def test_bucket_image_holds_sorted_members(self, workdir):
        write_swatches(workdir, ["Pale,#CCFFCC", "Forest,#006600", "Leaf,#339933"])
        main(["--color-swatches", "colors.txt"])

        with Image.open(workdir / "Green.png") as img:
            pixels = np.array(img.convert('RGB'))
        assert pixels.shape == (600, 200, 3)
        # darkest first
        assert tuple(pixels[0, 0]) == (0x00, 0x66, 0x00)
        assert tuple(pixels[200, 0]) == (0x33, 0x99, 0x33)
        assert tuple(pixels[599, 199]) == (0xCC, 0xFF, 0xCC)

    def test_empty_buckets_produce_nothing(self, workdir, capsys):
        write_swatches(workdir, ["Cherry,#FF0000", "Scarlet,#FF2400", "Leaf,#339933"])
        main(["--color-swatches", "colors.txt"])

        assert images_in(workdir) == ["Green.png", "Red.png"]
        out = capsys.readouterr().out
        for bucket in HUE_BUCKETS:
            if bucket.name not in ("Red", "Green"):
                assert f"{bucket.name}\n" not in out

    def test_filter_options_narrow_buckets(self, workdir, capsys):
        write_swatches(workdir, EXAMPLE_LINES)
        main(["--color-swatches", "colors.txt", "--min-lightness", "0.45"])

        assert images_in(workdir) == ["Cyan-Blue.png", "Red.png"]
        assert "Leaf" not in capsys.readouterr().out

    def test_everything_filtered_out_still_succeeds(self, workdir, capsys):
        write_swatches(workdir, EXAMPLE_LINES)
        main(["--color-swatches", "colors.txt", "--max-saturation", "0.1"])

        assert images_in(workdir) == []
        assert capsys.readouterr().out == ""

    def test_stale_images_are_removed(self, workdir):
        (workdir / "Blue.png").write_bytes(b"stale")
        (workdir / "Red.png").write_bytes(b"stale")
        write_swatches(workdir, ["Cherry,#FF0000"])
        main(["--color-swatches", "colors.txt"])

        assert images_in(workdir) == ["Red.png"]
        with Image.open(workdir / "Red.png") as img:
            assert img.size == (200, 200)

    def test_output_dir(self, workdir):
        out_dir = workdir / "out"
        out_dir.mkdir()
        write_swatches(workdir, EXAMPLE_LINES)
        main(["--color-swatches", "colors.txt", "--output-dir", str(out_dir)])

        assert images_in(out_dir) == ["Cyan-Blue.png", "Green.png", "Red.png"]
        assert images_in(workdir) == []

    def test_verbose_reports_on_stderr(self, workdir, capsys):
        (workdir / "Blue.png").write_bytes(b"stale")
        write_swatches(workdir, EXAMPLE_LINES)
        main(["--color-swatches", "colors.txt", "--verbose"])

        captured = capsys.readouterr()
        assert "Removed stale Blue.png" in captured.err
        assert "Wrote Red.png (1 swatch)" in captured.err
        assert "Sorted 3 swatches into 3 of 16 buckets" in captured.err
        assert "Wrote" not in captured.out

    def test_empty_input_warns(self, workdir, capsys):
        (workdir / "colors.txt").write_text("")
        main(["--color-swatches", "colors.txt"])

        assert "Warning: No swatches found" in capsys.readouterr().err
        assert images_in(workdir) == []


class TestMainErrors:

    def test_missing_required_option(self, workdir):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_inverted_range_exits_before_any_io(self, workdir, capsys):
        (workdir / "Red.png").write_bytes(b"stale")
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "missing.txt", "--min-hue", "200", "--max-hue", "100"])

        assert exc.value.code == 2
        assert "Error: min hue" in capsys.readouterr().err
        assert (workdir / "Red.png").exists()

    def test_out_of_domain_option(self, workdir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "colors.txt", "--max-lightness", "1.5"])
        assert exc.value.code == 2
        assert "outside [0, 1]" in capsys.readouterr().err

    def test_missing_output_dir(self, workdir, capsys):
        write_swatches(workdir, EXAMPLE_LINES)
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "colors.txt", "--output-dir", "nowhere"])
        assert exc.value.code == 2
        assert "Output directory not found" in capsys.readouterr().err

    def test_missing_input_file(self, workdir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "missing.txt"])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_non_utf8_input_exits_cleanly(self, workdir, capsys):
        (workdir / "colors.txt").write_bytes(b"Caf\xe9,#FF0000\n")
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "colors.txt"])

        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")
        assert images_in(workdir) == []

    def test_malformed_input_aborts_without_output(self, workdir, capsys):
        write_swatches(workdir, ["Cherry,#FF0000", "Sky"])
        with pytest.raises(SystemExit) as exc:
            main(["--color-swatches", "colors.txt"])

        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert "Malformed swatch file" in captured.err
        assert "colors.txt:2" in captured.err
        assert captured.out == ""
        assert images_in(workdir) == []


class TestRun:

    def test_returns_written_buckets(self, tmp_path, capsys):
        swatches = [swatch_from_hex("Cherry", "#FF0000"), swatch_from_hex("Brick", "#B22222")]
        written = run(swatches, FilterRange(), tmp_path)

        assert written == [("Red", 2)]
        assert images_in(tmp_path) == ["Red.png"]
        assert capsys.readouterr().out.splitlines()[0] == "Red"
