"""Locator pattern definitions.

Pydantic models describing what a logical UI element looks like in an
accessibility tree. Patterns are loaded once from configuration and are
never mutated afterwards; nested ``children`` patterns narrow a match
to elements found inside it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class MatchType(str, Enum):
    """How a pattern's string fields are compared against node attributes.

    Values are the spellings used in configuration files.
    """

    EXACT = "exact"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    REGEX = "regex"


class LocatorPattern(BaseModel):
    """Declarative description of one logical UI element.

    ``role`` is always compared by equality. ``identifier``, ``class_name``
    and ``label`` are compared using ``match_type`` and only when present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    role: str = Field(min_length=1, description="Accessibility role, matched exactly")
    identifier: str | None = Field(None, description="Accessibility identifier constraint")
    class_name: str | None = Field(
        None, alias="className", description="Class description constraint"
    )
    label: str | None = Field(None, description="Title/label constraint")
    match_type: MatchType = Field(
        MatchType.CONTAINS,
        alias="matchType",
        description="Comparison applied to identifier, class name and label",
    )
    index: int | None = Field(
        None, description="Candidate to select; negative counts from the end"
    )
    children: tuple[LocatorPattern, ...] | None = Field(
        None, description="Sub-patterns resolved inside each match"
    )

    @field_validator("children")
    @classmethod
    def _children_not_empty(
        cls, value: tuple[LocatorPattern, ...] | None
    ) -> tuple[LocatorPattern, ...] | None:
        if value is not None and len(value) == 0:
            raise ValueError("children must be omitted or contain at least one pattern")
        return value

    @model_validator(mode="after")
    def _regex_fields_compile(self) -> LocatorPattern:
        if self.match_type is MatchType.REGEX:
            for field_name, pattern in self.string_constraints():
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(f"invalid regex for {field_name}: {e}") from e
        return self

    def string_constraints(self) -> list[tuple[str, str]]:
        """Get the optional string fields that are set.

        Returns:
            (field name, expected value) pairs in matching order
        """
        constraints = []
        if self.identifier is not None:
            constraints.append(("identifier", self.identifier))
        if self.class_name is not None:
            constraints.append(("class_name", self.class_name))
        if self.label is not None:
            constraints.append(("label", self.label))
        return constraints

    @property
    def is_composite(self) -> bool:
        """Whether this pattern resolves through nested sub-patterns."""
        return self.children is not None

    def describe(self) -> str:
        """One-line summary for logs and diagnostics."""
        desc = f"Role: {self.role}"
        if self.identifier is not None:
            desc += f", Identifier: {self.identifier}"
        if self.class_name is not None:
            desc += f", Class: {self.class_name}"
        if self.label is not None:
            desc += f", Label: {self.label}"
        if self.index is not None:
            desc += f", Index: {self.index}"
        desc += f", MatchType: {self.match_type.value}"
        if self.children is not None:
            desc += f", Children: {len(self.children)}"
        return desc


class AppLocatorConfig(BaseModel):
    """Locator configuration for one application.

    The on-disk record uses ``bundleId``; ``app_name`` comes from the key
    the record is stored under.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    app_name: str = Field(description="Name the application is configured under")
    process_identifier: str = Field(
        min_length=1, alias="bundleId", description="Bundle or process identifier"
    )
    elements: Mapping[str, LocatorPattern] = Field(
        default_factory=dict,
        validate_default=True,
        description="Logical element name to pattern",
    )

    @field_validator("elements", mode="after")
    @classmethod
    def _freeze_elements(cls, value: Mapping[str, LocatorPattern]) -> Mapping[str, LocatorPattern]:
        return MappingProxyType(dict(value))


LocatorPattern.model_rebuild()
