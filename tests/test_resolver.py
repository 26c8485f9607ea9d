"""Tests for the command resolver (core/resolver.py).

The resolver is pure, so every test feeds a token list and checks the
returned command or the raised error.
"""

from __future__ import annotations

import pytest

from ws.core.models import Create, Delete, Goto, Help, List, Version
from ws.core.resolver import ALIASES, resolve_command
from ws.exceptions import CommandNotFoundError, TooManyArgsError, WorkspaceRequiredError


class TestArity:
    def test_no_args_is_help(self) -> None:
        assert resolve_command([]) == Help()

    @pytest.mark.parametrize(
        "args",
        [
            ["a", "b", "c"],
            ["create", "a", "b"],
            ["list", "x", "y"],
            ["help", "a", "b", "c", "d"],
        ],
    )
    def test_more_than_two_tokens_is_too_many(self, args: list[str]) -> None:
        with pytest.raises(TooManyArgsError):
            resolve_command(args)


class TestKeywords:
    @pytest.mark.parametrize("token", ["list", "ls", "l"])
    def test_list_aliases(self, token: str) -> None:
        assert resolve_command([token]) == List()

    def test_list_ignores_operand(self) -> None:
        assert resolve_command(["ls", "extra"]) == List()

    @pytest.mark.parametrize("token", ["help", "h"])
    def test_help_aliases(self, token: str) -> None:
        assert resolve_command([token]) == Help()

    @pytest.mark.parametrize("token", ["version", "v"])
    def test_version_aliases(self, token: str) -> None:
        assert resolve_command([token]) == Version()

    @pytest.mark.parametrize("token", ["create", "c", "new", "n", "insert", "i"])
    def test_create_aliases(self, token: str) -> None:
        assert resolve_command([token, "api"]) == Create("api")

    @pytest.mark.parametrize("token", ["delete", "d", "remove", "rm"])
    def test_delete_aliases(self, token: str) -> None:
        assert resolve_command([token, "api"]) == Delete("api")

    @pytest.mark.parametrize("token", ["create", "delete", "rm", "i"])
    def test_name_required(self, token: str) -> None:
        with pytest.raises(WorkspaceRequiredError):
            resolve_command([token])

    def test_empty_name_is_required(self) -> None:
        with pytest.raises(WorkspaceRequiredError):
            resolve_command(["create", ""])

    def test_keyword_can_be_a_workspace_name(self) -> None:
        assert resolve_command(["create", "list"]) == Create("list")

    def test_alias_table_is_complete(self) -> None:
        assert set(ALIASES.values()) == {"list", "help", "version", "create", "delete"}
        assert len(ALIASES) == 17


class TestGoto:
    def test_bare_name_is_goto(self) -> None:
        assert resolve_command(["my_project"]) == Goto("my_project")

    @pytest.mark.parametrize("token", ["LIST", "Create", "Help", "RM"])
    def test_keywords_are_case_sensitive(self, token: str) -> None:
        assert resolve_command([token]) == Goto(token)

    def test_bare_name_with_operand_is_too_many(self) -> None:
        with pytest.raises(TooManyArgsError):
            resolve_command(["my_project", "extra"])

    def test_empty_token_is_command_not_found(self) -> None:
        with pytest.raises(CommandNotFoundError):
            resolve_command([""])

    def test_accepts_tuple(self) -> None:
        assert resolve_command(("goto_me",)) == Goto("goto_me")
