"""
sectiongen - fetch UI sections from a remote registry into a project tree

A section is a component source file, an optional schema file and zero or
more nested components.  sectiongen downloads a section definition as JSON
and writes it under ``sections/`` and ``components/``.

Main Components:
    - sectiongen.registry: URL construction and asset fetching
    - sectiongen.materialize: writing sections and components to disk
    - sectiongen.generate: fetch-then-write orchestration
    - sectiongen.cli: the ``sectiongen`` command line
"""

from .config import SectiongenConfig, get_config
from .errors import (
    ConfigurationError,
    FilesystemError,
    RetrievalError,
    SectiongenError,
    ValidationError,
)
from .generate import generate_component, generate_section
from .models import BaseFile, Component, SectionComponent
from .registry import RegistryClient, build_registry_url

__version__ = "0.1.0"

__all__ = [
    "SectiongenConfig",
    "get_config",
    "SectiongenError",
    "ConfigurationError",
    "RetrievalError",
    "ValidationError",
    "FilesystemError",
    "BaseFile",
    "Component",
    "SectionComponent",
    "RegistryClient",
    "build_registry_url",
    "generate_section",
    "generate_component",
]
