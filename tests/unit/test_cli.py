from pathlib import Path

import pytest

from identicon import cli
from identicon.config import CliConfig
from identicon.errors import EncodingError


def test_parse_args_defaults() -> None:
    config = cli.parse_args(["Joe"])
    assert config == CliConfig(names=("Joe",), output_dir=Path("."), log_level="warning")


def test_parse_args_options(tmp_path: Path) -> None:
    config = cli.parse_args(["a", "b", "--output-dir", str(tmp_path), "--log-level", "debug"])
    assert config.names == ("a", "b")
    assert config.output_dir == tmp_path
    assert config.log_level == "debug"


def test_parse_args_requires_a_name() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_main_writes_one_png_per_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["Joe", "Ann", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "Joe.png").read_bytes().startswith(b"\x89PNG")
    assert (tmp_path / "Ann.png").exists()
    printed = capsys.readouterr().out.splitlines()
    assert printed == [str(tmp_path / "Joe.png"), str(tmp_path / "Ann.png")]


def test_run_continues_after_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    real_generate = cli.generate

    def flaky_generate(text: str) -> bytes:
        if text == "bad":
            raise EncodingError("boom")
        return real_generate(text)

    monkeypatch.setattr(cli, "generate", flaky_generate)
    status = cli.run(CliConfig(names=("bad", "Joe"), output_dir=tmp_path))
    assert status == 1
    assert not (tmp_path / "bad.png").exists()
    assert (tmp_path / "Joe.png").exists()


def test_run_reports_unwritable_output(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    assert cli.run(CliConfig(names=("Joe",), output_dir=blocker)) == 1
