"""Test the command line."""
from __future__ import annotations


def test_cli(capsys):
    from rawurl.__main__ import main

    assert main(["https://user:@example.com:8443/a/..%2f/b?x=1#top"]) == 0
    out = capsys.readouterr().out
    assert "Full URL:    https://user:@example.com:8443/a/..%2f/b?x=1#top" in out
    assert "Username:    user" in out
    assert "Password:    \n" in out
    assert "Hostname:    example.com" in out
    assert "Port:        8443" in out
    assert "Path:        /a/..%2f/b" in out
    assert "Request URI: /a/..%2f/b?x=1#top" in out


def test_cli_opaque(capsys):
    from rawurl.__main__ import main

    assert main(["mailto:user@example.com"]) == 0
    out = capsys.readouterr().out
    assert "Opaque:      user@example.com" in out
    assert "Host:" not in out


def test_cli_errors(capsys):
    from rawurl.__main__ import main

    assert main(["--strict", "example.com/x", "http://[::1/"]) == 1
    captured = capsys.readouterr()
    assert "No scheme found" in captured.err
    assert "Unclosed IPv6 literal" in captured.err


def test_cli_fallback_scheme(capsys):
    from rawurl.__main__ import main

    assert main(["--fallback-scheme", "http", "example.com/x"]) == 0
    assert "Full URL:    http://example.com/x" in capsys.readouterr().out


def test_cli_file(tmp_path, capsys):
    from rawurl.__main__ import main

    payloads = tmp_path / "urls.txt"
    payloads.write_text(
        "# payloads\n"
        "https://example.com/x/..;/\n"
        "\n"
        "https://example.com/x/。。;//\n",
        encoding="utf-8",
    )

    assert main(["-f", str(payloads)]) == 0
    out = capsys.readouterr().out
    assert "URL: https://example.com/x/..;/" in out
    assert "Path:        /x/。。;//" in out
    assert "payloads" not in out


def test_cli_compare(capsys):
    from rawurl.__main__ import main

    assert main(["--compare", "https://example.com/a/../b"]) == 0
    out = capsys.readouterr().out
    assert "Path:        /a/../b" in out
    assert "yarl URL:    https://example.com/b" in out
    assert "!! yarl changed the URL" in out
