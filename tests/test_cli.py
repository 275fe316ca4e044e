"""Tests for the command-line entry point."""

from main import run_cli
from utils.image_io import load_image


def test_synthetic_blur_to_ppm(tmp_path):
    out = tmp_path / "out.ppm"
    assert run_cli(["--synthetic=gradient", "blur", "-o", str(out)]) == 0
    image = load_image(str(out))
    assert (image.width, image.height) == (256, 256)


def test_rgb_split_writes_three_files(tmp_path):
    out = tmp_path / "parts.ppm"
    assert run_cli(["--synthetic=random", "rgb-split", "-o", str(out)]) == 0
    for name in ("red", "green", "blue"):
        assert (tmp_path / f"parts-{name}.ppm").exists()


def test_downscale_from_file(tmp_path):
    src = tmp_path / "src.ppm"
    run_cli(["--synthetic=checkerboard", "horizontal-flip", "-o", str(src)])
    out = tmp_path / "small.ppm"
    assert run_cli([str(src), "downscale", "32", "16", "-o", str(out)]) == 0
    image = load_image(str(out))
    assert (image.width, image.height) == (32, 16)


def test_invalid_levels_reported(tmp_path):
    out = tmp_path / "bad.ppm"
    assert run_cli(["--synthetic", "levels-adjust", "50", "40", "200", "-o", str(out)]) == 1
    assert not out.exists()


def test_unknown_operation_and_arity():
    assert run_cli(["--synthetic", "emboss"]) == 2
    assert run_cli(["--synthetic", "compress"]) == 2


def test_coincident_level_anchors_reported(tmp_path):
    out = tmp_path / "flat.ppm"
    assert run_cli(["--synthetic", "levels-adjust", "0", "0", "255", "-o", str(out)]) == 1
    assert not out.exists()


def test_rgb_split_then_combine_restores_image(tmp_path):
    src = tmp_path / "src.ppm"
    assert run_cli(["--synthetic=random", "vertical-flip", "-o", str(src)]) == 0
    assert run_cli([str(src), "rgb-split", "-o", str(tmp_path / "part.ppm")]) == 0
    out = tmp_path / "joined.ppm"
    args = [str(tmp_path / f"part-{name}.ppm") for name in ("red", "green", "blue")]
    assert run_cli([args[0], "rgb-combine", args[1], args[2], "-o", str(out)]) == 0
    assert load_image(str(out)) == load_image(str(src))


def test_rgb_combine_size_mismatch_reported(tmp_path):
    big = tmp_path / "big.ppm"
    small = tmp_path / "small.ppm"
    run_cli(["--synthetic=random", "blur", "-o", str(big)])
    run_cli([str(big), "downscale", "8", "8", "-o", str(small)])
    out = tmp_path / "bad.ppm"
    assert run_cli([str(big), "rgb-combine", str(big), str(small), "-o", str(out)]) == 1
    assert not out.exists()


def test_cli_logger_uses_module_name():
    import main
    assert main.logger.name == main.__name__
