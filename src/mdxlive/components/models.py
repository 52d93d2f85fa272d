"""Component structure, inline usage and generated artifact models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict


DEFAULT_DISABLED_CLASSES = "opacity-50 pointer-events-none cursor-not-allowed"


class ComponentStructure(BaseModel):
    """Class lookup tables and attributes recovered from one component's source."""
    model_config = ConfigDict(frozen=True)

    name:                str = "Component"
    variant_table:       dict[str, str]
    size_table:          dict[str, str] = {}
    base_classes:        str = ""
    disabled_classes:    str = DEFAULT_DISABLED_CLASSES
    observed_attributes: list[str] = []

    @property
    def default_variant(self) -> str:
        return next(iter(self.variant_table), "default")

    @property
    def default_size(self) -> str:
        return next(iter(self.size_table), "default")

    def classes_used(self) -> list[str]:
        """Every class referenced by base, variants, sizes and disabled state, deduplicated."""
        groups = [self.base_classes, *self.variant_table.values(),
                  *self.size_table.values(), self.disabled_classes]
        return list(dict.fromkeys(c for g in groups for c in g.split()))


class PropKind(str, Enum):
    string = "string"
    boolean = "boolean"
    expression = "expression"


@dataclass(frozen=True)
class PropValue:
    """A usage prop: string literal, boolean presence, or unevaluated {expression} text."""
    kind:  PropKind
    value: Union[str, bool]

    @classmethod
    def string(cls, value: str) -> "PropValue":
        return cls(PropKind.string, value)

    @classmethod
    def boolean(cls, value: bool = True) -> "PropValue":
        return cls(PropKind.boolean, value)

    @classmethod
    def expression(cls, source: str) -> "PropValue":
        return cls(PropKind.expression, source)


@dataclass(frozen=True)
class InlineUsage:
    """One parsed example tag such as <Button variant="primary">Click</Button>."""
    component:    str
    props:        dict[str, PropValue] = field(default_factory=dict)
    children:     str | None = None
    self_closing: bool = False


@dataclass(frozen=True)
class CachedComponent:
    name:        str
    source_path: Path
    structure:   ComponentStructure
    raw_source:  str


@dataclass(frozen=True)
class Artifact:
    """Generated custom-element source for one component/tag pair."""
    tag_name:     str
    source:       str
    classes_used: list[str]
    attributes:   list[str]
