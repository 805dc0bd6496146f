"""Tests for the rendered text of catalogue prompts."""

from unittests_mcp.prompts.handlers import invoke


def _text(registry, name, arguments):
    (message,) = invoke(registry, name, arguments)
    return message.text


class TestUnitTestPrompts:
    def test_basic(self, registry):
        assert _text(registry, "basic", {"fileOrFolder": "src/math.ts"}) == (
            "Create unit tests for the file or folder at the following path: `src/math.ts`"
        )

    def test_basic_with_target(self, registry):
        text = _text(
            registry,
            "basic-with-target",
            {"targetFileOrFolder": "src/math.test.ts", "fileOrFolder": "src/math.ts"},
        )
        assert text == (
            "Create unit tests for the file or folder at the following path: `src/math.ts`\n"
            "\n"
            "Write the unit tests to the following path: `src/math.test.ts`"
        )

    def test_workflow_with_language(self, registry):
        text = _text(
            registry,
            "workflow",
            {"fileOrFolder": "src/lib.rs", "language": "rust", "functionToTest": "parse"},
        )
        assert "1) Assume programming language is rust" in text
        assert "- functionToTest: parse" in text
        assert "- language: rust" in text
        assert "{{" not in text

    def test_workflow_infers_language_when_absent(self, registry):
        text = _text(registry, "workflow", {"fileOrFolder": "src/lib.rs"})
        assert "1) Identify programming language from fileOrFolder file extension" in text
        assert "- functionToTest: (not provided)" in text
        assert "- language: (not provided)" in text

    def test_workflow_empty_language_is_not_absent(self, registry):
        text = _text(registry, "workflow", {"fileOrFolder": "a.ts", "language": ""})
        assert "- language: \n" in text
        assert "Identify programming language from fileOrFolder file extension" in text

    def test_reference_inputs(self, registry):
        text = _text(
            registry,
            "reference",
            {
                "targetImplementation": "src/math.py",
                "referenceImplementation": "legacy/math.ts",
                "referenceTests": "legacy/math.test.ts",
            },
        )
        assert "- targetImplementation (code under test): src/math.py" in text
        assert "- referenceImplementation: legacy/math.ts" in text
        assert "- referenceTests: legacy/math.test.ts" in text
        assert "- solidity: consider gas costs" in text
        assert text.endswith("Produce results now.")

    def test_argument_text_inserted_verbatim(self, registry):
        text = _text(registry, "basic", {"fileOrFolder": "{{language}}"})
        assert "`{{language}}`" in text


class TestChangeReviewPrompts:
    def test_suggest_tests_branch(self, registry):
        text = _text(registry, "suggest-tests", {"diffScope": "branch"})
        assert "- diffScope: branch" in text
        assert "1) Get all changes since creation of branch from target branch" in text

    def test_suggest_tests_commit(self, registry):
        text = _text(registry, "suggest-tests", {"diffScope": "commit"})
        assert "1) Get all changes since latest commit" in text

    def test_zero_argument_prompts(self, registry):
        for name, heading in [
            ("merge-request-description", "## Backward Compatibility"),
            ("refactor-suggestions", "# Suggestions"),
            ("security-analysis", "## Risk Level Critical"),
        ]:
            assert heading in _text(registry, name, {})
