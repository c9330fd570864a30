"""Composable artifact predicates.

Each helper returns a ``Filter`` (``Artifact -> bool``); ``and_`` and
``or_`` combine them.  Filters are pure and never touch the filesystem.
"""

from __future__ import annotations

from brewforge.core.artifact_registry import Filter
from brewforge.models.artifacts import Artifact, ArtifactType


def by_goos(goos: str) -> Filter:
    return lambda a: a.goos == goos


def by_goarch(goarch: str) -> Filter:
    return lambda a: a.goarch == goarch


def by_goarm(goarm: str) -> Filter:
    return lambda a: a.goarm == goarm


def by_goamd64(goamd64: str) -> Filter:
    return lambda a: a.goamd64 == goamd64


def by_type(kind: ArtifactType) -> Filter:
    return lambda a: a.type == kind


def by_formats(*formats: str) -> Filter:
    """Match artifacts whose declared package format is one of *formats*."""
    wanted = frozenset(formats)
    return lambda a: a.format in wanted


def by_ids(*ids: str) -> Filter:
    """Match artifacts whose build/archive ID is in the allowlist."""
    wanted = frozenset(ids)
    return lambda a: a.id in wanted


def only_replacing_unibins(artifact: Artifact) -> bool:
    """Keep single-arch artifacts, and universal (``all``) ones only when
    they replace their single-arch counterparts."""
    return artifact.goarch != "all" or artifact.replaces()


def and_(*filters: Filter) -> Filter:
    return lambda a: all(f(a) for f in filters)


def or_(*filters: Filter) -> Filter:
    return lambda a: any(f(a) for f in filters)
