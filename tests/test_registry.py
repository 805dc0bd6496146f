"""Tests for the prompt registry and argument schemas."""

import pytest

from unittests_mcp.prompts import (
    EnumArgument,
    OptionalStringArgument,
    PromptDefinition,
    StringArgument,
    render_template,
    user_message,
)
from unittests_mcp.prompts.errors import (
    DuplicateNameError,
    InvalidValueError,
    NotFoundError,
    RegistryFrozenError,
)
from unittests_mcp.prompts.registry import PromptRegistry

CATALOGUE = [
    "basic",
    "basic-with-target",
    "workflow",
    "reference",
    "suggest-tests",
    "merge-request-description",
    "refactor-suggestions",
    "security-analysis",
]


class TestPromptRegistry:
    def test_register_and_get(self, echo_definition):
        registry = PromptRegistry()
        registry.register(echo_definition)
        assert registry.get("echo") is echo_definition
        assert "echo" in registry
        assert len(registry) == 1

    def test_get_unknown_raises(self):
        registry = PromptRegistry()
        with pytest.raises(NotFoundError, match="Unknown prompt"):
            registry.get("missing")

    def test_lookup_is_exact(self, registry):
        with pytest.raises(NotFoundError):
            registry.get("Basic")
        with pytest.raises(NotFoundError):
            registry.get("basic ")

    def test_duplicate_keeps_first(self, echo_definition):
        registry = PromptRegistry()
        registry.register(echo_definition)
        second = PromptDefinition(
            name="echo",
            title="Other",
            description="Another echo.",
            render=lambda arguments: [user_message("other")],
        )
        with pytest.raises(DuplicateNameError) as exc_info:
            registry.register(second)
        assert exc_info.value.name == "echo"
        assert registry.get("echo") is echo_definition
        assert len(registry) == 1

    def test_register_after_freeze_raises(self, echo_definition):
        registry = PromptRegistry()
        registry.freeze()
        assert registry.is_frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(echo_definition)
        assert "echo" not in registry

    def test_catalogue_is_frozen(self, registry, echo_definition):
        with pytest.raises(RegistryFrozenError):
            registry.register(echo_definition)

    def test_list_prompts_in_registration_order(self, registry):
        assert [p.name for p in registry.list_prompts()] == CATALOGUE

    def test_every_listed_prompt_resolves(self, registry):
        for summary in registry.list_prompts():
            assert registry.get(summary.name).name == summary.name

    def test_list_describes_arguments(self, registry):
        summaries = {p.name: p for p in registry.list_prompts()}

        workflow = summaries["workflow"]
        assert workflow.title == "Unit Tests Workflow"
        assert [(a.name, a.required) for a in workflow.arguments] == [
            ("fileOrFolder", True),
            ("functionToTest", False),
            ("language", False),
        ]
        assert all(a.allowed_values is None for a in workflow.arguments)

        (diff_scope,) = summaries["suggest-tests"].arguments
        assert diff_scope.name == "diffScope"
        assert diff_scope.required is True
        assert diff_scope.allowed_values == ["branch", "commit"]

        assert summaries["security-analysis"].arguments == []


class TestArgumentSchemas:
    def test_kinds(self):
        assert StringArgument(name="a").kind == "string"
        assert OptionalStringArgument(name="a").kind == "optional-string"
        assert EnumArgument(name="a", allowed_values=("x",)).kind == "enum"

    def test_required_flags(self):
        assert StringArgument(name="a").required is True
        assert OptionalStringArgument(name="a").required is False
        assert EnumArgument(name="a", allowed_values=("x",)).required is True

    def test_enum_requires_values(self):
        with pytest.raises(ValueError, match="no allowed values"):
            EnumArgument(name="scope", allowed_values=())

    def test_enum_validation_is_case_sensitive(self):
        argument = EnumArgument(name="scope", allowed_values=("branch", "commit"))
        assert argument.validate("commit") == "commit"
        with pytest.raises(InvalidValueError) as exc_info:
            argument.validate("Commit")
        assert exc_info.value.allowed_values == ("branch", "commit")

    def test_string_accepts_any_string(self):
        argument = StringArgument(name="path")
        assert argument.validate("") == ""
        assert argument.validate("../../etc/passwd") == "../../etc/passwd"

    def test_string_rejects_non_string(self):
        with pytest.raises(InvalidValueError):
            StringArgument(name="path").validate(42)

    def test_duplicate_argument_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate argument"):
            PromptDefinition(
                name="dup",
                title="Dup",
                description="",
                arguments=(StringArgument(name="a"), OptionalStringArgument(name="a")),
                render=lambda arguments: [],
            )


class TestRenderTemplate:
    def test_substitutes_all_placeholders(self):
        assert render_template("{{a}} and {{b}}", a="x", b="y") == "x and y"

    def test_missing_value_raises(self):
        with pytest.raises(ValueError, match="'b'"):
            render_template("{{a}} and {{b}}", a="x")

    def test_values_are_not_rescanned(self):
        assert render_template("{{a}}-{{b}}", a="{{b}}", b="y") == "{{b}}-y"
