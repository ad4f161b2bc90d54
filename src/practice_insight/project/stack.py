"""Tech stack detection from declared dependencies and file extensions.

The detected names tag extracted practices, so they use the same spelling
as practice text ("Next.js", "TypeScript"). Frameworks come first in
dependency order, then languages.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Mapping, Optional, Sequence

from ..logging_config import get_logger
from ..signals.models import Dependency

logger = get_logger(__name__)

# exact package name -> stack name
FRAMEWORK_PACKAGES: Mapping[str, str] = {
    "react": "React",
    "vue": "Vue",
    "@angular/core": "Angular",
    "svelte": "Svelte",
    "@sveltejs/kit": "SvelteKit",
    "next": "Next.js",
    "nuxt": "Nuxt",
    "@remix-run/react": "Remix",
    "express": "Express",
    "fastify": "Fastify",
    "@nestjs/core": "NestJS",
    "tailwindcss": "Tailwind",
    "django": "Django",
    "flask": "Flask",
    "fastapi": "FastAPI",
}

# scope prefix -> stack name, for packages published under a framework scope
FRAMEWORK_SCOPES: Mapping[str, str] = {
    "@vue/": "Vue",
    "@nuxt/": "Nuxt",
    "@angular/": "Angular",
}

EXTENSION_FRAMEWORKS: Mapping[str, str] = {".vue": "Vue", ".svelte": "Svelte"}

LANGUAGE_EXTENSIONS: tuple[tuple[str, frozenset[str]], ...] = (
    ("TypeScript", frozenset({".ts", ".tsx", ".mts", ".cts"})),
    ("JavaScript", frozenset({".js", ".jsx", ".mjs", ".cjs"})),
    ("Python", frozenset({".py"})),
    ("Go", frozenset({".go"})),
    ("Rust", frozenset({".rs"})),
)

LANGUAGE_MANIFESTS: Mapping[str, str] = {
    "package.json": "JavaScript",
    "requirements.txt": "Python",
    "pyproject.toml": "Python",
    "Pipfile": "Python",
    "go.mod": "Go",
    "Cargo.toml": "Rust",
}


def framework_for(name: str) -> Optional[str]:
    name = name.lower()
    if name in FRAMEWORK_PACKAGES:
        return FRAMEWORK_PACKAGES[name]
    for scope, framework in FRAMEWORK_SCOPES.items():
        if name.startswith(scope):
            return framework
    return None


def _languages(files: Sequence[str], dependency_names: set[str]) -> list[str]:
    found: set[str] = {"TypeScript"} if "typescript" in dependency_names else set()
    for rel in files:
        path = PurePosixPath(rel)
        if len(path.parts) == 1 and path.name in LANGUAGE_MANIFESTS:
            found.add(LANGUAGE_MANIFESTS[path.name])
        suffix = path.suffix.lower()
        for language, suffixes in LANGUAGE_EXTENSIONS:
            if suffix in suffixes:
                found.add(language)
    # TypeScript projects are not also tagged JavaScript
    if "TypeScript" in found:
        found.discard("JavaScript")
    return [language for language, _ in LANGUAGE_EXTENSIONS if language in found]


def detect_tech_stack(dependencies: Sequence[Dependency], files: Sequence[str] = ()) -> list[str]:
    """Stack names for a project: frameworks, then languages, without repeats.

    Args:
        dependencies: Declared dependencies, in manifest order
        files: Relative paths from the scanner
    """
    stack: dict[str, None] = {}
    for dep in dependencies:
        framework = framework_for(dep.name)
        if framework:
            stack.setdefault(framework)
    for rel in sorted(files):
        framework = EXTENSION_FRAMEWORKS.get(PurePosixPath(rel).suffix.lower())
        if framework:
            stack.setdefault(framework)
    for language in _languages(files, {dep.name.lower() for dep in dependencies}):
        stack.setdefault(language)

    result = list(stack)
    logger.debug(f"Tech stack: {', '.join(result) or 'unknown'}")
    return result
