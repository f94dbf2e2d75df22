"""Document model for parsed FBI files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FBIField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class FBISection(BaseModel):
    """A named node holding ordered fields and ordered child sections.

    The root section produced by the parser has an empty header. Duplicate field
    names and duplicate child headers are kept in file order; lookups return the
    first match.
    """

    header: str = ""
    fields: list[FBIField] = Field(default_factory=list)
    sections: list["FBISection"] = Field(default_factory=list)

    def add_field(self, name: str, value: str) -> FBIField:
        field = FBIField(name=name, value=value)
        self.fields.append(field)
        return field

    def add_section(self, section: "FBISection") -> "FBISection":
        self.sections.append(section)
        return section

    def get_value(self, key: str) -> str | None:
        for field in self.fields:
            if field.name == key:
                return field.value
        return None

    def get_section(self, key: str) -> "FBISection | None":
        for section in self.sections:
            if section.header == key:
                return section
        return None

    def to_raw_dict(self) -> dict[str, Any]:
        """Flatten into one mapping: ``"[header]"`` keys for sections, plain names for fields.

        Keys share one namespace and later writes win: repeated headers or names keep
        only their last entry, and fields are written after sections.
        """
        raw: dict[str, Any] = {}
        for section in self.sections:
            raw[f"[{section.header}]"] = section.to_raw_dict()
        for field in self.fields:
            raw[field.name] = field.value
        return raw

    def debug_lines(self, padding: str = "") -> list[str]:
        lines = [f"{padding}[{self.header}]", f"{padding}Fields: {len(self.fields)}"]
        for section in self.sections:
            lines.extend(section.debug_lines(padding + "    "))
        return lines

    def debug_print(self, padding: str = "") -> None:
        for line in self.debug_lines(padding):
            print(line)


__all__ = ["FBIField", "FBISection"]
