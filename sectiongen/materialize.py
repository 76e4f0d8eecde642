# sectiongen/materialize.py
"""Write fetched sections and components into a project tree.

Layout under the target directory::

    sections/<Name>.tsx          section source
    sections/<Name>.schema.ts    section schema
    components/<Name>.tsx        one per nested component

Existing files are overwritten.  There is no rollback: when a write fails,
files written earlier in the same call stay on disk.

Usage::

    from sectiongen.materialize import write_section_files
    paths = write_section_files(section, Path("/path/to/app"))
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path
from typing import Optional, Sequence

from .errors import FilesystemError
from .models import Component, SectionComponent
from .notify import Notifier
from .utils.logging import get_logger

logger = get_logger(__name__)

SECTIONS_DIRNAME = "sections"
COMPONENTS_DIRNAME = "components"

SECTION_SUFFIX = ".tsx"
SCHEMA_SUFFIX = ".schema.ts"
COMPONENT_SUFFIX = ".tsx"

DEFAULT_MAX_WORKERS = 8


# ---------------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------------


def _ensure_dir(path: Path) -> None:
    """Create *path* (one level only) unless it already exists."""
    if path.exists():
        return
    try:
        path.mkdir()
    except OSError as exc:
        logger.error(f"Cannot create directory {path}: {exc}")
        raise FilesystemError("cannot create directory", path) from exc
    logger.debug(f"Created directory {path}")


def _write_file(path: Path, content: str) -> Path:
    """Write *content* verbatim, replacing any existing file."""
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        logger.error(f"Cannot write {path}: {exc}")
        raise FilesystemError("cannot write file", path) from exc
    logger.debug(f"Wrote {path} ({len(content)} chars)")
    return path


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def write_section_files(
    section: SectionComponent,
    directory: Path,
    *,
    notifier: Optional[Notifier] = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[Path]:
    """Write a section's source, schema and nested components.

    Parameters
    ----------
    section:
        The fetched section.
    directory:
        Project directory; ``sections/`` and ``components/`` are created
        inside it when missing.  The directory itself must exist.
    notifier:
        Receives one success message per written file.
    max_workers:
        Upper bound on concurrent component writes.

    Returns
    -------
    list[Path]
        Written paths: source, schema, then components in declared order.

    Raises
    ------
    FilesystemError
        If a directory cannot be created or any file cannot be written.
    """
    notifier = notifier or Notifier()
    directory = Path(directory)
    sections_dir = directory / SECTIONS_DIRNAME
    components_dir = directory / COMPONENTS_DIRNAME

    _ensure_dir(sections_dir)
    written: list[Path] = []

    if section.source:
        written.append(_write_file(sections_dir / f"{section.name}{SECTION_SUFFIX}", section.source))
        notifier.success(
            f"Created section {section.name} in {sections_dir}",
            [section.source],
        )

    if section.schema_source:
        written.append(
            _write_file(sections_dir / f"{section.name}{SCHEMA_SUFFIX}", section.schema_source)
        )
        notifier.success(
            f"Created section schema {section.name}{SCHEMA_SUFFIX} in {sections_dir}",
            [section.schema_source],
        )

    if section.components:
        _ensure_dir(components_dir)
        written.extend(
            _write_components(section.components, components_dir, notifier, max_workers)
        )

    return written


def _write_components(
    components: Sequence[Component],
    components_dir: Path,
    notifier: Notifier,
    max_workers: int,
) -> list[Path]:
    """Write all components concurrently and wait for every write to settle.

    If any write failed, the first failure in declared order is raised once
    all writes have finished; the others are logged.
    """

    def _write_one(component: Component) -> Optional[Path]:
        if not component.source:
            logger.debug(f"Component {component.name} has no source, skipped")
            return None
        path = _write_file(components_dir / f"{component.name}{COMPONENT_SUFFIX}", component.source)
        notifier.success(
            f"Created component {component.name} in {components_dir}",
            [component.source],
        )
        return path

    workers = max(1, min(max_workers, len(components)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_write_one, c) for c in components]
        wait(futures)

    written: list[Path] = []
    failures: list[BaseException] = []
    for component, future in zip(components, futures):
        exc = future.exception()
        if exc is not None:
            logger.error(f"Component {component.name} failed: {exc}")
            failures.append(exc)
            continue
        path = future.result()
        if path is not None:
            written.append(path)

    if failures:
        if len(failures) > 1:
            logger.warning(f"{len(failures)} of {len(components)} component writes failed")
        raise failures[0]
    return written


# ---------------------------------------------------------------------------
# Single components
# ---------------------------------------------------------------------------


def write_component_file(
    component: Component,
    directory: Path,
    *,
    notifier: Optional[Notifier] = None,
) -> Optional[Path]:
    """Write one component to ``<directory>/components/<Name>.tsx``.

    Returns the written path, or ``None`` when the component has no source.
    """
    notifier = notifier or Notifier()
    components_dir = Path(directory) / COMPONENTS_DIRNAME
    _ensure_dir(components_dir)

    if not component.source:
        logger.debug(f"Component {component.name} has no source, nothing written")
        return None

    path = _write_file(components_dir / f"{component.name}{COMPONENT_SUFFIX}", component.source)
    notifier.success(
        f"Created component {component.name} in {components_dir}",
        [component.source],
    )
    return path
