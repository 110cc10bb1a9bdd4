"""Top-level container bundling an effect table, potency table and item kinds."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from .effects import EffectRecord
from .items import ItemKind


class CatalogData(BaseModel):
    """A complete catalog table, as loaded from (or dumped to) JSON."""

    effects: list[EffectRecord] = Field(default_factory=list)

    base_potency: dict[str, int] = Field(default_factory=dict)
    """Item id -> base potency.  Items missing here have potency 0."""

    items: list[ItemKind] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_table(self) -> CatalogData:
        """Reject duplicate ids, non-positive potency and dangling conflict refs."""
        errors: list[str] = []

        effect_ids: set[str] = set()
        for record in self.effects:
            if record.id in effect_ids:
                errors.append(f"Duplicate effect id {record.id!r}")
            effect_ids.add(record.id)

        item_ids: set[str] = set()
        for item in self.items:
            if item.id in item_ids:
                errors.append(f"Duplicate item id {item.id!r}")
            item_ids.add(item.id)

        for item_id, value in self.base_potency.items():
            if value <= 0:
                errors.append(f"Base potency for {item_id!r} must be positive, got {value}")

        for record in self.effects:
            for ref in sorted(record.incompatible - effect_ids):
                errors.append(
                    f"Effect {record.id!r} lists unknown incompatible effect {ref!r}"
                )

        if errors:
            raise ValueError(
                f"CatalogData validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {e}" for e in errors)
            )
        return self
