"""Tests for the ``unreact`` console command."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup

from unreact import cli
from unreact.session import Unreact


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a site project with a config file and chdir into it."""
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "index.hbs").write_text(
        "<!DOCTYPE html><html><body><h1>{{ msg }}</h1><p>{{ owner }}</p></body></html>",
        encoding="utf-8",
    )
    (tmp_path / "styles").mkdir()
    (tmp_path / "styles" / "main.scss").write_text("p { margin: 0; }", encoding="utf-8")
    (tmp_path / "public").mkdir()
    (tmp_path / "unreact.yaml").write_text(
        dedent(
            """
            url: https://mysite.com
            globals:
              owner: Sam
            pages:
              - path: index
                template: index
                data:
                  msg: Hello!
              - path: blog/hello
                content: <p>plain</p>
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_writes_production_site(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.build()

    out = capsys.readouterr().out
    assert "wrote build/index.html" in out
    assert "wrote build/blog/hello.html" in out
    assert out.strip().endswith("Build complete")
    soup = BeautifulSoup(
        (project / "build" / "index.html").read_text(encoding="utf-8"), "html.parser"
    )
    assert soup.h1 is not None and soup.h1.string == "Hello!"
    assert soup.p is not None and soup.p.string == "Sam"
    assert (project / "build" / "styles" / "main.css").is_file()


def test_dev_flag_builds_dev_directory_and_listens(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[Unreact] = []
    monkeypatch.setattr(Unreact, "listen", lambda self: calls.append(self))

    cli.build(dev=True)

    assert (project / ".devbuild" / "index.html").is_file()
    assert not (project / "build").exists()
    assert len(calls) == 1
    assert calls[0].is_dev is True


def test_missing_directory_exits_with_error(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (project / "public").rmdir()

    with pytest.raises(SystemExit) as excinfo:
        cli.build()

    assert excinfo.value.code == 1
    assert "error: Directory does not exist at 'public'" in capsys.readouterr().err


def test_render_failure_exits_with_error(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = project / "other.yaml"
    config.write_text(
        "url: https://mysite.com\npages:\n  - path: x\n    template: missing\n",
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)

    assert excinfo.value.code == 1
    assert "Template does not exist with name 'missing'" in capsys.readouterr().err


def test_missing_config_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=tmp_path / "absent.yaml")

    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("- a\n- b\n", "error: Top-level YAML structure must be a mapping."),
        ("url: [unclosed\n", "error: while parsing a flow sequence"),
    ],
)
def test_unusable_config_document_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], document: str, expected: str
) -> None:
    config = tmp_path / "unreact.yaml"
    config.write_text(document, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)

    assert excinfo.value.code == 1
    assert expected in capsys.readouterr().err
