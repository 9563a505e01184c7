from __future__ import annotations

import pytest

from squeeze.cli import main


@pytest.fixture(autouse=True)
def outside_project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def run(capsys, *argv: str) -> list:
    main(list(argv))
    return capsys.readouterr().out.splitlines()


def test_help(capsys) -> None:
    main(["help"])
    assert "usage: squeeze" in capsys.readouterr().out


def test_help_for_command(capsys) -> None:
    main(["help", "rebase"])
    assert "new_base" in capsys.readouterr().out


def test_resolve_relative(capsys) -> None:
    out = run(capsys, "resolve", "-b", "/var/www/css", "../images/./logo.png")
    assert out == ["../images/logo.png"]


def test_resolve_files(capsys) -> None:
    out = run(capsys, "resolve", "-f", "-b", "/var/www/css", "../images/logo.png")
    assert out == ["/var/www/images/logo.png"]


def test_resolve_absolute_with_cycled_hosts(capsys) -> None:
    out = run(
        capsys,
        "resolve",
        "-a",
        "-c",
        "-r",
        "/var/www",
        "-H",
        "a.com",
        "-H",
        "b.com",
        "/x.png",
        "http://b.com/y.png",
        "/z.png",
    )
    assert out == ["http://a.com/x.png", "http://b.com/y.png", "http://a.com/z.png"]


def test_resolve_exists(tmp_path, capsys) -> None:
    (tmp_path / "here.png").write_bytes(b"")
    out = run(capsys, "resolve", "-e", "-b", str(tmp_path), "here.png", "gone.png")
    assert out == ["here.png"]


def test_resolve_error_exits(capsys) -> None:
    with pytest.raises(SystemExit) as info:
        main(["resolve", "-b", "/var/www", "/favicon.ico", "logo.png"])
    assert info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: /favicon.ico: no document root set" in captured.err


def test_resolve_keep_going(capsys) -> None:
    main(["resolve", "-k", "-b", "/var/www", "/favicon.ico", "logo.png"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["logo.png"]
    assert "ERROR: /favicon.ico" in captured.err


def test_resolve_unmatched_host(capsys) -> None:
    main(
        [
            "resolve",
            "-k",
            "-f",
            "-r",
            "/var/www",
            "-H",
            "assets1.example.com",
            "http://other.example.com/x.png",
        ]
    )
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no matching host found" in captured.err


def test_rebase(capsys) -> None:
    out = run(
        capsys,
        "rebase",
        "-b",
        "/var/www/public/stylesheets",
        "/var/www/public",
        "../images/logo.png",
    )
    assert out == ["images/logo.png"]


def test_hosts(capsys) -> None:
    out = run(capsys, "hosts", "-H", "a", "-H", "https://b/")
    assert out == ["http://a", "https://b"]


def test_hosts_count(capsys) -> None:
    out = run(capsys, "hosts", "-n", "3", "-H", "a", "-H", "b")
    assert out == ["http://a", "http://b", "http://a"]


def test_hosts_none(capsys) -> None:
    main(["hosts"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WARNING: no hosts configured" in captured.err


def test_uses_config_file(tmp_path, capsys) -> None:
    (tmp_path / "squeeze.yml").write_text(
        "base: public/stylesheets\n"
        "document_root: public\n"
        "hosts: [cdn.example.com]\n"
    )
    out = run(capsys, "resolve", "-a", "-c", "../images/logo.png")
    assert out == ["http://cdn.example.com/images/logo.png"]


def test_options_override_config(tmp_path, capsys) -> None:
    config = tmp_path / "custom.yml"
    config.write_text("document_root: public\nhosts: cdn.example.com\n")
    out = run(
        capsys,
        "resolve",
        "--config",
        str(config),
        "-a",
        "-c",
        "-H",
        "other.example.com",
        "/logo.png",
    )
    assert out == ["http://other.example.com/logo.png"]


def test_missing_config_is_fatal(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit):
        main(["resolve", "--config", str(tmp_path / "nope.yml"), "logo.png"])
    assert "FATAL: configuration" in capsys.readouterr().err


def test_config_base_defaults_to_cwd(tmp_path, monkeypatch, capsys) -> None:
    root = tmp_path.resolve()
    (root / "squeeze.yml").write_text("document_root: .\n")
    (root / "css").mkdir()
    monkeypatch.chdir(root / "css")
    out = run(capsys, "resolve", "-f", "../images/logo.png")
    assert out == [str(root / "images" / "logo.png")]
