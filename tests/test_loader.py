"""
tests/test_loader.py
Tests for envx/loader.py

Covers:
  - Line parsing: comments, blanks, quotes, trailing text after quotes
  - Path resolution precedence and ~ expansion
  - Override rules and the returned map
"""

import os

import pytest

from envx import (
    Envx, InMemoryAccessor, configure_defaults, load_env, load_env_sync,
    parse_dotenv,
)
from envx.config import EnvxConfig
from envx.loader import expand_home, resolve_paths


class TestParse:

    def test_basic_pairs(self):
        assert parse_dotenv("X=1\nY=foo bar\n") == {"X": "1", "Y": "foo bar"}

    def test_comments_and_blank_lines(self):
        content = "# header\n\n   \nA=1\n  # indented comment\n"
        assert parse_dotenv(content) == {"A": "1"}

    def test_no_inline_comment_stripping(self):
        assert parse_dotenv("A=1 # not a comment") == {"A": "1 # not a comment"}

    def test_crlf(self):
        assert parse_dotenv("A=1\r\nB=2\r\n") == {"A": "1", "B": "2"}

    def test_first_equals_splits(self):
        assert parse_dotenv("URL=postgres://u:p@h/db?sslmode=require") == {
            "URL": "postgres://u:p@h/db?sslmode=require"}

    def test_lines_without_equals_or_key_skipped(self):
        assert parse_dotenv("JUSTTEXT\n=value\n  =x\nK = v \n") == {"K": "v"}

    def test_empty_value(self):
        assert parse_dotenv("EMPTY=") == {"EMPTY": ""}

    @pytest.mark.parametrize("line,expected", [
        ('A="quoted value"', "quoted value"),
        ("A='single'", "single"),
        ('A="  keep inner spaces  "', "  keep inner spaces  "),
        ('A="x" tail ', "xtail"),
        ('A="unterminated', '"unterminated'),
        ("A='mixed\"", "'mixed\""),
        ('A=not "quoted"', 'not "quoted"'),
    ])
    def test_quotes(self, line, expected):
        assert parse_dotenv(line)["A"] == expected

    def test_suffix_after_closing_quote_kept_verbatim(self):
        assert parse_dotenv('Z="quoted value"\\n\n') == {"Z": "quoted value\\n"}

    def test_last_occurrence_wins(self):
        assert parse_dotenv("A=1\nA=2\n") == {"A": "2"}


class TestPaths:

    def test_explicit_single(self):
        assert resolve_paths("a.env", EnvxConfig(env_file_paths=["b.env"])) == ["a.env"]

    def test_explicit_list(self):
        assert resolve_paths(["a", "b"], EnvxConfig()) == ["a", "b"]

    def test_configured_paths(self):
        assert resolve_paths(None, EnvxConfig(env_file_paths=["b.env"])) == ["b.env"]

    def test_default_path(self):
        assert resolve_paths(None, EnvxConfig()) == [".env"]

    def test_explicit_empty_list_loads_nothing(self):
        assert resolve_paths([], EnvxConfig(env_file_paths=["b.env"])) == []

    def test_empty_string_falls_back(self):
        assert resolve_paths("", EnvxConfig()) == [".env"]

    def test_expand_home(self):
        acc = InMemoryAccessor({"HOME": "/home/me"})
        assert expand_home("~/.env", acc) == "/home/me/.env"
        assert expand_home("~app.env", acc) == "/home/me/app.env"
        assert expand_home("rel/.env", acc) == "rel/.env"

    def test_expand_home_trailing_separator(self):
        acc = InMemoryAccessor({"HOME": "/home/me/"})
        assert expand_home("~.env", acc) == "/home/me/.env"

    def test_userprofile_fallback(self):
        acc = InMemoryAccessor({"USERPROFILE": "C:\\Users\\me"})
        assert expand_home("~\\.env", acc) == "C:\\Users\\me\\.env"

    def test_no_home_strips_tilde(self):
        assert expand_home("~/.env", InMemoryAccessor()) == "/.env"


class TestLoad:

    @pytest.mark.asyncio
    async def test_loads_into_os_environ(self, write_file, scrub_env):
        scrub_env("X", "Y", "Z")
        path = write_file(".env.test", 'X=1\nY=foo bar\nZ="quoted value"\\n\n# comment\n')
        out = await load_env(path)
        assert os.environ["X"] == "1"
        assert os.environ["Y"] == "foo bar"
        assert os.environ["Z"] == "quoted value\\n"
        assert out == {"X": "1", "Y": "foo bar", "Z": "quoted value\\n"}

    @pytest.mark.asyncio
    async def test_existing_value_wins_without_override(self, write_file):
        env = Envx(InMemoryAccessor({"A": "real"}))
        out = await env.load(write_file("a.env", "A=file\nB=2\n"))
        assert out == {"A": "file", "B": "2"}
        assert env.accessor.get("A") == "real"
        assert env.accessor.get("B") == "2"

    @pytest.mark.asyncio
    async def test_override(self, write_file):
        env = Envx(InMemoryAccessor({"A": "real"}))
        await env.load(write_file("a.env", "A=file\n"), override=True)
        assert env.accessor.get("A") == "file"

    @pytest.mark.asyncio
    async def test_missing_file_skipped(self, tmp_path, write_file):
        env = Envx(InMemoryAccessor())
        present = write_file("b.env", "B=1\n")
        out = await env.load([str(tmp_path / "nope.env"), present])
        assert out == {"B": "1"}

    @pytest.mark.asyncio
    async def test_later_files_overwrite_map(self, write_file):
        env = Envx(InMemoryAccessor())
        first = write_file("1.env", "A=one\nB=b\n")
        second = write_file("2.env", "A=two\n")
        out = await env.load([first, second])
        assert out == {"A": "two", "B": "b"}
        # first file set A; second file does not override it
        assert env.accessor.get("A") == "one"

    @pytest.mark.asyncio
    async def test_later_files_overwrite_env_with_override(self, write_file):
        env = Envx(InMemoryAccessor())
        first = write_file("1.env", "A=one\n")
        second = write_file("2.env", "A=two\n")
        await env.load([first, second], override=True)
        assert env.accessor.get("A") == "two"

    @pytest.mark.asyncio
    async def test_configured_paths_used(self, write_file):
        env = Envx(InMemoryAccessor())
        env.configure(env_file_paths=[write_file("cfg.env", "C=3\n")])
        assert await env.load() == {"C": "3"}

    @pytest.mark.asyncio
    async def test_default_dotenv_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("D=4\n", encoding="utf-8")
        env = Envx(InMemoryAccessor())
        assert await env.load() == {"D": "4"}

    @pytest.mark.asyncio
    async def test_explicit_empty_list_skips_default_dotenv(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("D=4\n", encoding="utf-8")
        env = Envx(InMemoryAccessor())
        assert await env.load([]) == {}
        assert env.accessor.get("D") is None

    @pytest.mark.asyncio
    async def test_home_expansion(self, tmp_path):
        (tmp_path / "app.env").write_text("H=1\n", encoding="utf-8")
        env = Envx(InMemoryAccessor({"HOME": str(tmp_path)}))
        assert await env.load("~/app.env") == {"H": "1"}

    @pytest.mark.asyncio
    async def test_pathlike(self, tmp_path):
        path = tmp_path / "p.env"
        path.write_text("P=1\n", encoding="utf-8")
        env = Envx(InMemoryAccessor())
        assert await env.load(path) == {"P": "1"}

    def test_sync_wrapper(self, write_file, scrub_env):
        scrub_env("SYNC_KEY")
        path = write_file("s.env", "SYNC_KEY=yes\n")
        configure_defaults(env_file_paths=[path])
        assert load_env_sync() == {"SYNC_KEY": "yes"}
        assert os.environ["SYNC_KEY"] == "yes"
