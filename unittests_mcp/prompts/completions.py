"""
Completion providers for prompt arguments.

Every provider has the signature ``(partial_value, sibling_values) -> list[str]``
and is pure: the result depends only on its inputs. ``sibling_values`` holds
the arguments already bound by the caller; a missing key means that argument
has not been chosen yet.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

DIFF_SCOPES: tuple[str, ...] = ("branch", "commit")

KNOWN_LANGUAGES: tuple[str, ...] = (
    "typescript",
    "javascript",
    "python",
    "rust",
    "go",
    "java",
    "kotlin",
    "csharp",
    "cpp",
    "c",
    "ruby",
    "php",
    "swift",
    "solidity",
)

EXTENSION_LANGUAGES: dict[str, str] = {
    ".ts": "typescript",
    ".tsx": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".py": "python",
    ".rs": "rust",
    ".go": "go",
    ".java": "java",
    ".kt": "kotlin",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".hpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".rb": "ruby",
    ".php": "php",
    ".swift": "swift",
    ".sol": "solidity",
}

_JS_FAMILY = (".ts", ".tsx", ".mts", ".cts", ".js", ".jsx", ".mjs", ".cjs")


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def _split_path(path: str) -> tuple[str, str]:
    """Split into (directory prefix including separator, basename)."""
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    return path[:cut], path[cut:]


def _split_extension(basename: str) -> tuple[str, str]:
    dot = basename.rfind(".")
    if dot <= 0:
        return basename, ""
    return basename[:dot], basename[dot:]


def _prefer_prefix(candidates: Iterable[str], partial: str) -> list[str]:
    """Move candidates that start with ``partial`` to the front."""
    candidates = list(candidates)
    if not partial:
        return candidates
    matching = [c for c in candidates if c.startswith(partial)]
    return matching + [c for c in candidates if c not in matching]


def infer_language(path: str | None) -> str | None:
    """Infer a language name from a file path's extension."""
    if not path:
        return None
    _, basename = _split_path(path)
    _, extension = _split_extension(basename)
    return EXTENSION_LANGUAGES.get(extension.lower())


def derive_test_paths(path: str) -> list[str]:
    """Conventional test file locations for a source file, most common first.

    Folders, declaration files and files that already look like tests have
    no derived target.
    """
    directory, basename = _split_path(path)
    stem, extension = _split_extension(basename)
    if not extension:
        return []

    if extension in _JS_FAMILY:
        if basename.endswith(".d.ts") or stem.endswith((".test", ".spec")):
            return []
        return [
            f"{directory}{stem}.test{extension}",
            f"{directory}{stem}.spec{extension}",
        ]
    if extension == ".py":
        if stem.startswith("test_") or stem.endswith("_test"):
            return []
        return [f"{directory}test_{stem}.py"]
    if extension == ".go":
        if stem.endswith("_test"):
            return []
        return [f"{directory}{stem}_test.go"]
    if extension == ".sol":
        if stem.endswith(".t"):
            return []
        return [f"{directory}{stem}.t.sol"]
    return []


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


def complete_test_target(partial: str, siblings: Mapping[str, str]) -> list[str]:
    """Suggest where to write tests based on the bound ``fileOrFolder``."""
    source = siblings.get("fileOrFolder")
    if not source:
        return []
    return _prefer_prefix(derive_test_paths(source), partial)


def complete_language(partial: str, siblings: Mapping[str, str]) -> list[str]:
    """Known language names, the one inferred from ``fileOrFolder`` first."""
    inferred = infer_language(siblings.get("fileOrFolder"))
    ordered = list(KNOWN_LANGUAGES)
    if inferred is not None:
        ordered.remove(inferred)
        ordered.insert(0, inferred)
    prefix = partial.lower()
    return [language for language in ordered if language.startswith(prefix)]


def complete_diff_scope(partial: str, siblings: Mapping[str, str]) -> list[str]:
    return [scope for scope in DIFF_SCOPES if scope.startswith(partial)]
