"""Tests for the strenum command line entry point."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from strenum.cli import EXIT_INTERNAL_ERROR, EXIT_USER_ERROR, main, split_variants
from strenum.codegen.assembler import generate
from strenum.codegen.models import CodegenInvalidError
from strenum.config import Config, GofmtConfig


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env():
    """Keep STRENUM_* variables from the caller's shell out of the tests."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("STRENUM_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestSplitVariants:
    def test_comma_separated(self):
        assert split_variants(["backlog,in_review,done"]) == ["backlog", "in_review", "done"]

    def test_multiple_arguments(self):
        assert split_variants(["a,b", "c"]) == ["a", "b", "c"]

    def test_empty_pieces_kept(self):
        assert split_variants(["a,,b"]) == ["a", "", "b"]


class TestMain:
    def test_writes_file(self, output_dir: Path):
        main([str(output_dir), "Status", "backlog,in_review,done", "--no-format"])
        path = output_dir / "statusenum" / "statusenum.go"
        assert path.read_bytes() == generate("Status", "backlog", "in_review", "done")

    def test_separate_variant_arguments(self, output_dir: Path):
        main([str(output_dir), "Status", "backlog", "in_review", "done", "--no-format"])
        path = output_dir / "statusenum" / "statusenum.go"
        assert path.read_bytes() == generate("Status", "backlog", "in_review", "done")

    def test_stdout(self, output_dir: Path, capsysbinary):
        main([str(output_dir), "main", "Something,Aaa,Bbb,Cc_xxxx_zzz", "--no-format", "--stdout"])
        out = capsysbinary.readouterr().out
        assert out == generate("main", "Something", "Aaa", "Bbb", "Cc_xxxx_zzz")
        assert list(output_dir.iterdir()) == []

    def test_collision_exits_with_user_error(self, output_dir: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(output_dir), "X", "Aa_b,AaB", "--no-format"])
        assert exc_info.value.code == EXIT_USER_ERROR
        err = capsys.readouterr().err
        assert "Aa_b" in err and "AaB" in err
        assert list(output_dir.iterdir()) == []

    def test_empty_variant_exits_with_user_error(self, output_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(output_dir), "Status", "a,", "--no-format"])
        assert exc_info.value.code == EXIT_USER_ERROR

    def test_invalid_type_name(self, output_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(output_dir), "1bad", "a", "--no-format"])
        assert exc_info.value.code == EXIT_USER_ERROR

    def test_required_gofmt_missing(self, output_dir: Path):
        with patch("strenum.codegen.gofmt.shutil.which", return_value=None):
            with pytest.raises(SystemExit) as exc_info:
                main([str(output_dir), "Status", "done", "--require-gofmt"])
        assert exc_info.value.code == EXIT_USER_ERROR

    def test_invalid_codegen_exits_with_internal_error(self, output_dir: Path, capsys):
        rejected = AsyncMock(side_effect=CodegenInvalidError("gofmt rejected the generated source"))
        with patch("strenum.codegen.gofmt.shutil.which", return_value="/usr/bin/gofmt"), \
                patch("strenum.codegen.gofmt.GofmtFormatter.format", rejected):
            with pytest.raises(SystemExit) as exc_info:
                main([str(output_dir), "Status", "done"])
        assert exc_info.value.code == EXIT_INTERNAL_ERROR
        assert "Internal error" in capsys.readouterr().err

    def test_gofmt_flag_sets_path(self, output_dir: Path):
        with patch("strenum.codegen.gofmt.shutil.which", return_value=None) as which:
            main([str(output_dir), "Status", "done", "--gofmt", "/opt/go/bin/gofmt"])
        which.assert_called_with("/opt/go/bin/gofmt")

    def test_config_file(self, tmp_path: Path, output_dir: Path):
        cfg_path = Config(gofmt=GofmtConfig(enabled=False)).save(tmp_path / "strenum.json")
        with patch("strenum.codegen.gofmt.GofmtFormatter.format") as fmt:
            main([str(output_dir), "Color", "red", "--config", str(cfg_path)])
        fmt.assert_not_called()
        assert (output_dir / "colorenum" / "colorenum.go").exists()

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["only-dir"])
        assert exc_info.value.code == 2
        assert exc_info.value.code != EXIT_INTERNAL_ERROR

    def test_dir_overrides_output_dir_env(self, tmp_path: Path, output_dir: Path):
        with patch.dict(os.environ, {"STRENUM_OUTPUT_DIR": str(tmp_path / "from-env")}):
            main([str(output_dir), "Color", "red", "--no-format"])
        assert (output_dir / "colorenum" / "colorenum.go").exists()
        assert not (tmp_path / "from-env").exists()

    def test_bad_timeout_env_exits_with_user_error(self, output_dir: Path, capsys):
        with patch.dict(os.environ, {"STRENUM_GOFMT_TIMEOUT": "soon"}):
            with pytest.raises(SystemExit) as exc_info:
                main([str(output_dir), "Color", "red"])
        assert exc_info.value.code == EXIT_USER_ERROR
        assert "Invalid configuration" in capsys.readouterr().err

    def test_malformed_config_file_exits_with_user_error(
        self, tmp_path: Path, output_dir: Path, capsys
    ):
        cfg_path = tmp_path / "strenum.json"
        cfg_path.write_text('{"gofmt": {"timeout": 0}}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(output_dir), "Color", "red", "--config", str(cfg_path)])
        assert exc_info.value.code == EXIT_USER_ERROR
        assert "Invalid configuration" in capsys.readouterr().err
        assert list(output_dir.iterdir()) == []

    def test_missing_config_file_exits_with_user_error(self, tmp_path: Path, output_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(output_dir), "Color", "red", "--config", str(tmp_path / "absent.json")])
        assert exc_info.value.code == EXIT_USER_ERROR
