"""
Change review prompts.

Prompts that ask the calling agent to inspect the repository's pending
changes: test suggestions from a diff, merge request description, refactor
suggestions and a security review.
"""

from __future__ import annotations

from unittests_mcp.prompts import (
    EnumArgument,
    Message,
    PromptDefinition,
    ResolvedArguments,
    render_template,
    user_message,
)
from unittests_mcp.prompts.completions import DIFF_SCOPES, complete_diff_scope
from unittests_mcp.prompts.registry import PromptRegistry

_DIFF_SCOPE_CHANGES = {
    "branch": "creation of branch from target branch",
    "commit": "latest commit",
}


# ---------------------------------------------------------------------------
# suggest-tests
# ---------------------------------------------------------------------------

_SUGGEST_TESTS_PROMPT = """\
Task:
Inspect the repository for code changes and recommend test additions or updates.

Input:
- diffScope: {{diffScope}}

Procedure:
Phase 1 - Parse the diff:
1) Get all changes since {{changesSince}}
2) Identify changed or added functions, methods, classes, constants, or modules.
3) Ignore comment-only or formatting changes.

Phase 2 - Get the changes
4) For each affected symbol:
  - Determine change type: added | modified | deleted | refactored.
  - Detect whether the logic, signature, or control flow changed.
  - Cross-reference coverage data if provided.
5) Prioritize recommendations:
  - HIGH: new code or core logic changes with missing or low test coverage.
  - MEDIUM: modified parameters, return types, or conditionals.
  - LOW: trivial changes with existing adequate coverage.
6) Flag risky changes (input validation, deserialization, external calls, or others).
7) Return Markdown structured as follows containing all recommendations listed \
in each category

--
# Tests Recommendations

## Risk Level High
**calculateAPR**
location: src/lib/math.ts `calculateAPR`
change type: modified
reason: New branch added for negative interest handling.
suggested tests:
- Verify APR calculation for zero and negative interest rates
- Test error thrown for NaN input

...

## Risk Level Medium
...

--

Constraints:
- Analyze only within the given code. Do not invent missing context or external APIs.
Be deterministic and concise. Return only recommendations.

Output:
- Output each phase and step you are currently doing
- Output markdown recommendations result at the end
- Output detailed error if any error occurs
"""


def render_suggest_tests(arguments: ResolvedArguments) -> list[Message]:
    diff_scope = arguments["diffScope"]
    return [
        user_message(
            render_template(
                _SUGGEST_TESTS_PROMPT,
                diffScope=diff_scope,
                changesSince=_DIFF_SCOPE_CHANGES[diff_scope],
            )
        )
    ]


SUGGEST_TESTS_PROMPT = PromptDefinition(
    name="suggest-tests",
    title="Suggest Unit Test",
    description="Suggest Unit test to be added for the merge request using git diff.",
    arguments=(
        EnumArgument(
            name="diffScope",
            allowed_values=DIFF_SCOPES,
            description=(
                "The diff scope to generate unit tests for (either 'branch' or 'commit')."
            ),
            completer=complete_diff_scope,
        ),
    ),
    render=render_suggest_tests,
    tags=frozenset({"unit-tests", "git-diff"}),
)


# ---------------------------------------------------------------------------
# merge-request-description
# ---------------------------------------------------------------------------

_MERGE_REQUEST_DESCRIPTION_PROMPT = """\
Task:
Create the most complete and professional Git merge request (MR) description \
possible, following established best practices.

Procedure:
Phase 1 - Fetch and Analyze Changes
1) Get all changes since creation of branch from the target branch
2) Detect modified files and classify them (e.g., source code, configuration, \
documentation, tests, etc..)
3) Identify major functional areas affected (e.g., ui, auth, api, contracts, \
security, etc.)
4) Detect breaking changes, dependency updates, and any migration requirements.
5) Summarize the purpose, major changes, affected components, and any security, \
dependency, or testing implications

Phase 2 - Generate Merge Request Description
6) Generate a detailed and professional merge request description in Markdown \
format structured as follows

--
## Summary
Short high level overview of the purpose.

## Description
Detailed descriptions of all the changes made, their scope, impact and effects.

## Motivation / Context
Why the change is required, including the issue reference if applicable.

## Changes
- [ ] List of major code or feature changes.
- [ ] Highlight of configuration, deployment, or dependency updates.

## Security Impact
- [ ] Describe any security-sensitive modifications.
- [ ] Mention mitigations, audits, or validations performed.

## Testing
- [ ] List or summarize test coverage and new test cases.
- [ ] Include steps for manual verification.

## Backward Compatibility
- [ ] Note if any breaking changes exist.
- [ ] Provide migration instructions if needed.
--

Phase 3 - Refinement
7) Use consistent tense and technical clarity.
8) Enforce line length under 100 characters where possible.
9) Remove redundant or trivial commit noise (e.g., "fix typo").
10) Whenever possible cross-reference related issues or tickets automatically \
(Fixes #1234).

Constraints:
- Analyze only within the given code. Do not invent missing context or external APIs.

Output:
- Output each phase and step you are currently doing
- Output merge request markdown description result at the end
- Output detailed error if any error occurs
"""


def render_merge_request_description(arguments: ResolvedArguments) -> list[Message]:
    return [user_message(_MERGE_REQUEST_DESCRIPTION_PROMPT)]


MERGE_REQUEST_DESCRIPTION_PROMPT = PromptDefinition(
    name="merge-request-description",
    title="Build merge request description",
    description=(
        "Get diff changes of the branch since master and build appropriate merge "
        "request description summarizing changes"
    ),
    render=render_merge_request_description,
    tags=frozenset({"git-diff", "merge-request"}),
)


# ---------------------------------------------------------------------------
# refactor-suggestions
# ---------------------------------------------------------------------------

_REFACTOR_SUGGESTIONS_PROMPT = """\
Task:
Inspect the repository for code changes and recommend refactors.

Procedure:
Phase 1 - Get the changes:
1) Get code changes since branch creation from target
2) Scoped from those changes analyze code from modified and added functions
3) Suggest (do not re-write functions) refactors focused on security, \
maintainability, readability, logic flow, and functional programming purity.
4) Amongst other refactor suggestions that you think are best include \
suggestions that increase purity and immutability, reduce side effects and \
shared state, improve readability and testability, eliminate security \
anti-patterns, etc...

Phase 2 - Return suggestion
5) Return Markdown structured as follows containing all suggestions

--
# Suggestions

**calculateAPR**
location: src/lib/math.ts `calculateAPR`
description: Detailed explanation of why this function should be refactored
refactor strategy: Explain rationale explicitly
refactored code:
`
function(){
}
`
--

Constraints:
Analyze only within the given code. Do not invent missing context or external APIs.
Be deterministic and concise.

Output:
- Output each phase and step you are currently doing
- Output suggestions markdown result at the end
- Output detailed error if any error occurs
"""


def render_refactor_suggestions(arguments: ResolvedArguments) -> list[Message]:
    return [user_message(_REFACTOR_SUGGESTIONS_PROMPT)]


REFACTOR_SUGGESTIONS_PROMPT = PromptDefinition(
    name="refactor-suggestions",
    title="Suggest refactors for new and modified code",
    description="Get diff changes build list of appropriate refactors that could be made",
    render=render_refactor_suggestions,
    tags=frozenset({"git-diff", "refactor"}),
)


# ---------------------------------------------------------------------------
# security-analysis
# ---------------------------------------------------------------------------

_SECURITY_ANALYSIS_PROMPT = """\
Task:
Inspect the repository for code changes and recommend changes specializing in \
secure software design and vulnerability mitigations. Perform a static security \
review.

Procedure:
Phase 1 - Get the changes:
1) Get code changes since branch creation from target
2) Scoped from those changes analyze code from modified and added code \
(functions, configuration etc..)
3) Identify vulnerabilities or risky patterns (e.g., reentrancy, unchecked \
inputs, unsafe deserialization, race conditions, privilege escalation, misuse \
of cryptography, etc..).
4) Detect non-compliance with internal security policies or coding standards.
5) Highlight dependency or permission risks introduced by new imports or \
external calls.
6) Suggest minimal, safe code-level remediations that preserve logic.

Phase 2 - Return suggestion
7) Return Markdown structured as follows containing all security flags

--
# Recommendations

High-level explanation of risk and next steps

## Risk Level Critical
**calculateAPR**
location: src/lib/math.ts `calculateAPR`
type: type of issue
description: Detailed explanation of the issue
recommendation: Specific mitigation with code-level detail
...

## Risk Level High
...

--

Constraints:
- Never invent context or external data.
- Assume principle of least privilege and functional immutability.
- Focus on verifiable, code-level evidence.

Output:
- Output each phase and step you are currently doing
- Output recommendations markdown result at the end
- Output detailed error if any error occurs
"""


def render_security_analysis(arguments: ResolvedArguments) -> list[Message]:
    return [user_message(_SECURITY_ANALYSIS_PROMPT)]


SECURITY_ANALYSIS_PROMPT = PromptDefinition(
    name="security-analysis",
    title="Security analysis of modified code",
    description=(
        "Analyze modified code and suggest changes to ensure maximal security "
        "and avoid vulnerabilities"
    ),
    render=render_security_analysis,
    tags=frozenset({"git-diff", "security"}),
)


def register(registry: PromptRegistry) -> None:
    for definition in (
        SUGGEST_TESTS_PROMPT,
        MERGE_REQUEST_DESCRIPTION_PROMPT,
        REFACTOR_SUGGESTIONS_PROMPT,
        SECURITY_ANALYSIS_PROMPT,
    ):
        registry.register(definition)
