"""Base artifact envelope shared by the top-level contracts.

Every document handed to an external consumer (renderer, highlighter, JSON
export) is wrapped in an `Artifact` that carries:

- `kind`    : a short machine label with a dotted major suffix, e.g. ``chronos_parse.v1``
- `version` : a semantic *schema* version string, e.g. ``1.0.0``

Versioning
----------
Backward-compatible additive changes bump the *minor* version; breaking changes
to field meanings bump the *major* version and the `kind` suffix.

All contracts are frozen: once the assembler produces them nothing may mutate
them.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

Semver = Annotated[
    str,
    Field(
        pattern=r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:[-+][0-9A-Za-z\.-]+)?$",
        description="Semantic version (MAJOR.MINOR.PATCH), optional pre-release/build.",
    ),
]


class Frozen(BaseModel):
    """Immutable base model for every chronos-md contract."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Artifact(Frozen):
    """Versioned envelope embedded by top-level contracts."""

    kind: str = Field(description="Short machine label, e.g. 'chronos_parse.v1'")
    version: Semver = Field(description="Schema version (semver)")

    @field_validator("kind")
    @classmethod
    def _must_have_dot(cls, v: str) -> str:
        """Enforce a `<name>.v<major>` style label."""
        if "." not in v:
            raise ValueError("kind should include a dotted suffix, e.g., 'chronos_parse.v1'")
        return v


__all__ = ["Artifact", "Frozen", "Semver"]
