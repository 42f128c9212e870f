"""Tests for argument parsing and the main entry point."""

import os

import cv2
import numpy as np
import pytest

import main
from config import (
    ConfigError,
    DEFAULT_OUTPUT,
    DEFAULT_SEED_COUNT,
    DEFAULT_SIZE,
    parse_count,
    parse_size,
)


class TestConfigParsing:

    def test_parse_size(self):
        assert parse_size("320,200") == (320, 200)
        assert parse_size(" 8 , 9 ") == (8, 9)

    @pytest.mark.parametrize("text", ["256", "a,b", "0,10", "10,-1", "1,2,3", ""])
    def test_parse_size_rejects(self, text):
        with pytest.raises(ConfigError):
            parse_size(text)

    @pytest.mark.parametrize("text", ["x", "0", "-4", "2.5"])
    def test_parse_count_rejects(self, text):
        with pytest.raises(ConfigError):
            parse_count(text)


class TestParseArgs:

    def test_defaults(self):
        cfg = main.parse_args([])
        assert cfg.seed_count == DEFAULT_SEED_COUNT
        assert (cfg.width, cfg.height) == DEFAULT_SIZE
        assert cfg.output == DEFAULT_OUTPUT
        assert cfg.rng_seed is None
        assert not cfg.mark_seeds

    def test_all_options(self):
        cfg = main.parse_args(
            ["-s", "64,32", "-c", "20", "--seed", "7", "-j", "2", "--mark-seeds", "out.png"]
        )
        assert (cfg.width, cfg.height) == (64, 32)
        assert cfg.seed_count == 20
        assert cfg.rng_seed == 7
        assert cfg.workers == 2
        assert cfg.mark_seeds
        assert cfg.output == "out.png"

    def test_long_options(self):
        cfg = main.parse_args(["--size", "10,12", "--count", "3"])
        assert (cfg.width, cfg.height, cfg.seed_count) == (10, 12, 3)

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_exits_zero(self, flag, capsys):
        with pytest.raises(SystemExit) as exc:
            main.parse_args([flag])
        assert exc.value.code == 0
        assert "--size" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["-s", "12"], ["-c", "zero"], ["-c", "0"]])
    def test_malformed_arguments_exit_with_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main.parse_args(argv)
        assert exc.value.code == 2
        err = capsys.readouterr().err
        assert "Invalid parameter" in err or "Size requires" in err


class TestMain:

    def test_writes_image(self, tmp_path, capsys):
        out = str(tmp_path / "v.png")
        assert main.main(["-s", "16,8", "-c", "4", "--seed", "1", out]) == 0
        img = cv2.imread(out)
        assert img.shape == (8, 16, 3)
        assert "[OK] Wrote 4-seed voronoi to 16x8" in capsys.readouterr().out

    def test_seeded_runs_are_identical(self, tmp_path):
        a, b = str(tmp_path / "a.png"), str(tmp_path / "b.png")
        main.main(["-s", "20,20", "--seed", "99", "-j", "1", a])
        main.main(["-s", "20,20", "--seed", "99", "-j", "4", b])
        assert np.array_equal(cv2.imread(a), cv2.imread(b))

    def test_mark_seeds_writes_overlay(self, tmp_path):
        out = str(tmp_path / "v.png")
        assert main.main(["-s", "16,16", "--seed", "1", "--mark-seeds", out]) == 0
        assert os.path.exists(str(tmp_path / "v_seeds.png"))

    def test_output_failure_reports_error(self, tmp_path, capsys):
        out = str(tmp_path / "v.unknownext")
        assert main.main(["-s", "4,4", "--seed", "1", out]) == 1
        assert "[ERROR]" in capsys.readouterr().err
