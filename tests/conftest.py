"""Shared test fixtures for LeanSpec tests."""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

import pytest

from leanspec.spec import SpecFrontmatter, SpecInfo, SpecStatus

FIXED_NOW = datetime(2025, 11, 5, 10, 30, tzinfo=UTC)

MakeSpec = Callable[..., SpecInfo]
WriteSpec = Callable[..., Path]


@pytest.fixture
def now() -> datetime:
    """A fixed, timezone-aware 'current time'."""
    return FIXED_NOW


@pytest.fixture
def make_spec() -> MakeSpec:
    """Return a factory for in-memory spec records."""

    def _make(
        path: str,
        *,
        status: SpecStatus = SpecStatus.PLANNED,
        depends_on: Sequence[str] = (),
        related: Sequence[str] = (),
        created: str = "2025-01-01",
    ) -> SpecInfo:
        return SpecInfo(
            path=path,
            title=path,
            frontmatter=SpecFrontmatter(
                status=status,
                created=created,
                depends_on=tuple(depends_on),
                related=tuple(related),
            ),
        )

    return _make


@pytest.fixture
def write_spec() -> WriteSpec:
    """Return a helper that writes a spec document under a corpus root.

    Works against the real filesystem and against pyfakefs.
    """

    def _write(
        specs_dir: Path,
        name: str,
        *,
        status: str = "planned",
        created: str = "2025-01-01",
        depends_on: Sequence[str] = (),
        related: Sequence[str] = (),
        extra: str = "",
        body: str | None = None,
    ) -> Path:
        lines = ["---", f"status: {status}", f"created: '{created}'"]
        if depends_on:
            lines.append("depends_on:")
            lines.extend(f"  - '{dep}'" for dep in depends_on)
        if related:
            lines.append("related:")
            lines.extend(f"  - '{other}'" for other in related)
        if extra:
            lines.append(extra.rstrip("\n"))
        lines.append("---")
        lines.append("")
        title = name.rsplit("/", 1)[-1]
        lines.append(body if body is not None else f"# {title}\n")

        path = specs_dir / name / "README.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
