"""Tests for the completion providers."""

import pytest

from unittests_mcp.prompts.completions import (
    KNOWN_LANGUAGES,
    complete_diff_scope,
    complete_language,
    complete_test_target,
    derive_test_paths,
    infer_language,
)


class TestDeriveTestPaths:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("foo.ts", ["foo.test.ts", "foo.spec.ts"]),
            ("src/lib/math.tsx", ["src/lib/math.test.tsx", "src/lib/math.spec.tsx"]),
            ("src\\app.js", ["src\\app.test.js", "src\\app.spec.js"]),
            ("pkg/parser.py", ["pkg/test_parser.py"]),
            ("cmd/server.go", ["cmd/server_test.go"]),
            ("contracts/Vault.sol", ["contracts/Vault.t.sol"]),
        ],
    )
    def test_conventional_targets(self, source, expected):
        assert derive_test_paths(source) == expected

    @pytest.mark.parametrize(
        "source",
        [
            "src",
            "src/components/",
            "types/index.d.ts",
            "foo.test.ts",
            "foo.spec.js",
            "tests/test_parser.py",
            "cmd/server_test.go",
            "README.md",
            ".env",
        ],
    )
    def test_no_target(self, source):
        assert derive_test_paths(source) == []


class TestCompleteTestTarget:
    def test_uses_sibling(self):
        assert complete_test_target("", {"fileOrFolder": "foo.ts"}) == [
            "foo.test.ts",
            "foo.spec.ts",
        ]

    def test_absent_sibling(self):
        assert complete_test_target("", {}) == []
        assert complete_test_target("foo", {"targetFileOrFolder": "x"}) == []

    def test_partial_moves_matches_first(self):
        assert complete_test_target("foo.s", {"fileOrFolder": "foo.ts"}) == [
            "foo.spec.ts",
            "foo.test.ts",
        ]

    def test_deterministic(self):
        siblings = {"fileOrFolder": "src/a.ts"}
        assert complete_test_target("src/", siblings) == complete_test_target("src/", siblings)


class TestCompleteLanguage:
    def test_all_languages_without_context(self):
        assert complete_language("", {}) == list(KNOWN_LANGUAGES)

    def test_inferred_language_first(self):
        values = complete_language("", {"fileOrFolder": "src/main.rs"})
        assert values[0] == "rust"
        assert sorted(values) == sorted(KNOWN_LANGUAGES)

    def test_prefix_filter_is_case_insensitive(self):
        assert complete_language("Ty", {}) == ["typescript"]
        assert complete_language("c", {"fileOrFolder": "lib.cpp"}) == ["cpp", "csharp", "c"]

    def test_unknown_extension(self):
        assert infer_language("notes.txt") is None
        assert infer_language(None) is None
        assert infer_language("App.TSX") == "typescript"


class TestCompleteDiffScope:
    def test_prefix(self):
        assert complete_diff_scope("", {}) == ["branch", "commit"]
        assert complete_diff_scope("b", {}) == ["branch"]
        assert complete_diff_scope("release", {}) == []
