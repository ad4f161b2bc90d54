"""Public API for Practice Insight.

The engine stages can be driven individually with already-collected inputs,
or end to end through analyze(), which also runs the bundled project
collaborators (file discovery, manifests, practice sampling, structure).

Example:
    >>> from practice_insight import analyze
    >>>
    >>> # Reconcile a project against a reference corpus
    >>> result = analyze("/path/to/app", corpus_dir="/path/to/corpus")
    >>> [s.title for s in result.report.suggestions]
    ['Use try-catch blocks', ...]
    >>>
    >>> # Requirements only
    >>> result = analyze("/path/to/app")
    >>> [r.document_name for r in result.requirements]
    ['global-rules.mdc', 'custom-tools.mdc', 'code-style.mdc', ...]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Union

from .comparison import UsageComparator
from .config import ReconcileConfig, load_config
from .corpus import CorpusDocument, Practice, PracticeExtractor, load_corpus
from .exceptions import InvalidPathError
from .logging_config import get_logger, setup_logging
from .project import (
    PracticeSampler,
    classify_directories,
    detect_code_features,
    detect_routers,
    detect_tech_stack,
    discover_files,
    read_dependencies,
)
from .requirements import Requirement, RequirementSynthesizer
from .result import AnalysisResult
from .signals import (
    CodeFeature,
    Dependency,
    ProjectPractice,
    ProjectSignals,
    RouterSignal,
    sample_files,
)
from .suggestions import ReconciliationReport, SuggestionAggregator

logger = get_logger(__name__)


def extract_practices(
    documents: Iterable[CorpusDocument],
    tech_stack: Optional[Sequence[str]] = None,
    config: Optional[ReconcileConfig] = None,
) -> list[Practice]:
    """Extract deduplicated practices from reference documents.

    Args:
        documents: Reference guidance texts, optionally pre-tagged by category
        tech_stack: Tech-stack names to tag practices with (defaults to config.tech_stack)
        config: Extraction settings (defaults to ReconcileConfig())
    """
    config = config or ReconcileConfig()
    extractor = PracticeExtractor(
        tech_stack=config.tech_stack if tech_stack is None else tech_stack,
        min_point_length=config.min_point_length,
        min_section_length=config.min_section_length,
    )
    return extractor.extract(documents)


def reconcile(
    practices: Sequence[Practice],
    signals: ProjectSignals,
    config: Optional[ReconcileConfig] = None,
    existing_documentation: Sequence[str] = (),
) -> ReconciliationReport:
    """Compare practices against project signals and aggregate the report.

    Identical inputs give an identical report.
    """
    config = config or ReconcileConfig()
    comparator = UsageComparator(
        thresholds=config.thresholds,
        sample_limit=config.sample_limit,
        existing_documentation=existing_documentation,
    )
    comparisons = comparator.compare_all(practices, signals)
    return SuggestionAggregator().aggregate(comparisons)


def synthesize_requirements(
    dependencies: Sequence[Dependency] = (),
    routers: Sequence[RouterSignal] = (),
    code_features: Optional[Mapping[str, CodeFeature]] = None,
    project_practice: Optional[ProjectPractice] = None,
) -> list[Requirement]:
    """Decide which guidance documents must exist, sorted by priority."""
    return RequirementSynthesizer().synthesize(
        dependencies=dependencies,
        routers=routers,
        code_features=code_features,
        project_practice=project_practice,
    )


def analyze(
    path: Union[str, Path] = ".",
    corpus_dir: Optional[Union[str, Path]] = None,
    config_file: Optional[Path] = None,
    existing_documentation: Sequence[str] = (),
    **overrides,
) -> AnalysisResult:
    """Run the full pipeline on a project directory.

    Pipeline:
    1. Load configuration (auto-discover TOML + apply overrides)
    2. Discover files, read manifests, detect the tech stack, sample practice
       and structure signals
    3. Synthesize requirements
    4. If a corpus is given: load it, extract practices, reconcile

    Args:
        path: Project root
        corpus_dir: Reference corpus directory; None skips reconciliation
        config_file: Optional explicit config file path
        existing_documentation: Previously generated documentation texts
        **overrides: Configuration overrides (e.g., verbose=True, sample_limit=20)

    Returns:
        AnalysisResult with the report (None without a corpus) and requirements

    Raises:
        ConfigurationError: If configuration is invalid
        InvalidPathError: If the project or corpus directory does not exist
    """
    # 1. Load configuration, then configure logging from it
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity, log_file=config.log_file)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    root = Path(path)
    if not root.is_dir():
        raise InvalidPathError(root, "project directory does not exist")
    logger.info(f"Starting analysis of {root}")

    # 2. Collaborators
    files = discover_files(
        root,
        exclude_patterns=config.exclude_patterns,
        allow_hidden_files=config.allow_hidden_files,
        follow_symlinks=config.follow_symlinks,
    )
    dependencies = read_dependencies(root)
    sampler = PracticeSampler(
        sample_limit=config.style_sample_limit,
        code_extensions=config.code_extensions,
        max_workers=config.read_workers,
    )
    project_practice = sampler.sample(root, files)
    file_sample = sample_files(
        root,
        files,
        limit=config.sample_limit,
        extensions=config.code_extensions,
        max_workers=config.read_workers,
    )
    code_features = detect_code_features(files, file_sample.contents)
    routers = detect_routers(files)
    tech_stack = config.tech_stack or detect_tech_stack(dependencies, files)
    logger.info(
        f"Project scanned: {len(files)} files, {len(dependencies)} dependencies, "
        f"{len(file_sample)} sampled"
        + (f", stack: {', '.join(tech_stack)}" if tech_stack else "")
    )

    # 3. Requirements
    requirements = synthesize_requirements(
        dependencies=dependencies,
        routers=routers,
        code_features=code_features,
        project_practice=project_practice,
    )

    # 4. Reconciliation
    report = None
    practice_count = 0
    if corpus_dir is not None:
        documents = load_corpus(corpus_dir, max_workers=config.read_workers)
        practices = extract_practices(documents, tech_stack=tech_stack, config=config)
        practice_count = len(practices)
        signals = ProjectSignals(
            practice=project_practice,
            directory_purposes=tuple(classify_directories(files)),
            file_sample=file_sample,
        )
        report = reconcile(practices, signals, config, existing_documentation)

    logger.info(
        f"Analysis complete: {len(requirements)} requirements"
        + (f", {len(report.suggestions)} suggestions" if report is not None else "")
    )
    return AnalysisResult(
        root=root,
        report=report,
        requirements=tuple(requirements),
        practice_count=practice_count,
        file_count=len(files),
    )
