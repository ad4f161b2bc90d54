"""Dependency manifests — read declared dependencies from the project root.

Supported:
    package.json      dependencies, devDependencies, peerDependencies
    requirements*.txt one requirement per line (comments, options skipped)
    pyproject.toml    [project] dependencies / optional-dependencies,
                      [tool.poetry] dependencies / dev-dependencies / groups

A manifest that cannot be parsed is logged and skipped. Dependencies are
returned in manifest order without repeats (first declaration wins).
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Iterable, Mapping, Optional

from ..config import load_toml_file
from ..logging_config import get_logger
from ..signals.models import Dependency

logger = get_logger(__name__)

_PACKAGE_JSON_SECTIONS = (
    ("dependencies", "production"),
    ("devDependencies", "development"),
    ("peerDependencies", "peer"),
)

# name, then anything that starts a version spec, marker or extras list
_REQUIREMENT = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)\s*(\[[^\]]*\])?\s*(.*)$")


def parse_package_json(data: Mapping) -> list[Dependency]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    deps: list[Dependency] = []
    for section, dep_type in _PACKAGE_JSON_SECTIONS:
        entries = data.get(section) or {}
        if not isinstance(entries, Mapping):
            continue
        for name, version in entries.items():
            deps.append(Dependency(name=name, version=str(version), type=dep_type))
    return deps


def parse_requirement(line: str, dep_type: str = "production") -> Optional[Dependency]:
    """Parse one PEP 508-ish requirement string; None for blanks, comments and options."""
    line = line.split("#", 1)[0].strip()
    if not line or line.startswith("-"):
        return None
    match = _REQUIREMENT.match(line)
    if not match:
        return None
    name, _extras, rest = match.groups()
    version = rest.split(";", 1)[0].strip()
    return Dependency(name=name, version=version, type=dep_type)


def parse_requirements_txt(text: str, dep_type: str = "production") -> list[Dependency]:
    deps = (parse_requirement(line, dep_type) for line in text.splitlines())
    return [d for d in deps if d is not None]


def parse_pyproject(data: Mapping) -> list[Dependency]:
    deps: list[Dependency] = []

    project = data.get("project") or {}
    for spec in project.get("dependencies") or []:
        dep = parse_requirement(spec)
        if dep:
            deps.append(dep)
    for _group, specs in sorted((project.get("optional-dependencies") or {}).items()):
        for spec in specs:
            dep = parse_requirement(spec, "optional")
            if dep:
                deps.append(dep)

    poetry = (data.get("tool") or {}).get("poetry") or {}
    deps.extend(_poetry_section(poetry.get("dependencies") or {}, "production"))
    deps.extend(_poetry_section(poetry.get("dev-dependencies") or {}, "development"))
    for _group, body in sorted((poetry.get("group") or {}).items()):
        deps.extend(_poetry_section((body or {}).get("dependencies") or {}, "development"))
    return deps


def _poetry_section(entries: Mapping, dep_type: str) -> list[Dependency]:
    deps = []
    for name, spec in entries.items():
        if name.lower() == "python":
            continue
        if isinstance(spec, Mapping):
            version = str(spec.get("version", ""))
        else:
            version = str(spec)
        deps.append(Dependency(name=name, version=version, type=dep_type))
    return deps


def _unique(deps: Iterable[Dependency]) -> list[Dependency]:
    seen: set[str] = set()
    result = []
    for dep in deps:
        key = dep.name.lower()
        if key not in seen:
            seen.add(key)
            result.append(dep)
    return result


def read_dependencies(root: Path | str) -> list[Dependency]:
    """Collect dependencies from every supported manifest in ``root``."""
    root = Path(root)
    deps: list[Dependency] = []

    package_json = root / "package.json"
    if package_json.is_file():
        try:
            deps.extend(parse_package_json(json.loads(package_json.read_text(encoding="utf-8"))))
        except (OSError, ValueError) as e:
            logger.warning(f"Skipping unreadable manifest {package_json}: {e}")

    for req_file in sorted(root.glob("requirements*.txt")):
        dep_type = "development" if "dev" in req_file.stem or "test" in req_file.stem else "production"
        try:
            deps.extend(parse_requirements_txt(req_file.read_text(encoding="utf-8"), dep_type))
        except (OSError, ValueError) as e:
            logger.warning(f"Skipping unreadable manifest {req_file}: {e}")

    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        try:
            deps.extend(parse_pyproject(load_toml_file(pyproject)))
        except Exception as e:
            logger.warning(f"Skipping unreadable manifest {pyproject}: {e}")

    deps = _unique(deps)
    logger.debug(f"Read {len(deps)} dependencies from {root}")
    return deps
