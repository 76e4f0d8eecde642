# sectiongen/generate.py
"""Fetch an asset from the registry and write it into a project.

Usage::

    from sectiongen.generate import generate_section
    paths = generate_section("Hero", Path.cwd())

Errors from either stage propagate unchanged.  Files written before a
failure are left in place.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from .config import SectiongenConfig, get_config
from .errors import ValidationError
from .materialize import write_component_file, write_section_files
from .naming import ensure_safe_name
from .notify import Notifier
from .registry import RegistryClient
from .utils.logging import get_logger, log_generation_complete, log_generation_start

logger = get_logger(__name__)


def _checked_name(name: str, kind: str) -> str:
    try:
        return ensure_safe_name(name)
    except ValueError as exc:
        raise ValidationError(kind, str(exc)) from exc


def generate_section(
    section_name: str,
    directory: Path,
    *,
    config: Optional[SectiongenConfig] = None,
    client: Optional[RegistryClient] = None,
    notifier: Optional[Notifier] = None,
) -> list[Path]:
    """Fetch section *section_name* and write its files under *directory*.

    Parameters
    ----------
    section_name:
        Registry name of the section, already normalised by the caller.
    directory:
        Existing project directory receiving ``sections/`` and ``components/``.
    config:
        Defaults to :func:`get_config`.  Ignored when *client* is given.
    client:
        Registry client to fetch with.  A temporary one is created and
        closed when omitted.
    notifier:
        Receives progress and success messages.

    Returns
    -------
    list[Path]
        Every file written, in write order.
    """
    name = _checked_name(section_name, "section")
    directory = Path(directory)
    notifier = notifier or (client.notifier if client is not None else Notifier())
    cfg = client.config if client is not None else (config or get_config())

    log_generation_start(logger, "section", name, directory)
    t0 = time.perf_counter()

    if client is None:
        with RegistryClient(cfg, notifier=notifier) as owned:
            section = owned.fetch_section(name)
    else:
        section = client.fetch_section(name)

    written = write_section_files(
        section,
        directory,
        notifier=notifier,
        max_workers=cfg.max_workers,
    )

    log_generation_complete(logger, "section", name, written, time.perf_counter() - t0)
    return written


def generate_component(
    component_name: str,
    directory: Path,
    *,
    config: Optional[SectiongenConfig] = None,
    client: Optional[RegistryClient] = None,
    notifier: Optional[Notifier] = None,
) -> list[Path]:
    """Fetch component *component_name* and write it under ``directory/components``.

    Same contract as :func:`generate_section`.
    """
    name = _checked_name(component_name, "component")
    directory = Path(directory)
    notifier = notifier or (client.notifier if client is not None else Notifier())
    cfg = client.config if client is not None else (config or get_config())

    log_generation_start(logger, "component", name, directory)
    t0 = time.perf_counter()

    if client is None:
        with RegistryClient(cfg, notifier=notifier) as owned:
            component = owned.fetch_component(name)
    else:
        component = client.fetch_component(name)

    path = write_component_file(component, directory, notifier=notifier)
    written = [path] if path is not None else []

    log_generation_complete(logger, "component", name, written, time.perf_counter() - t0)
    return written
