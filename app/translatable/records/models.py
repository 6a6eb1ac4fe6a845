"""Translatable model declarations.

A TranslatableModel names the base and translation tables of one entity,
the translated attributes, and how translation rows point back at their
base row. Its accessor table (attribute name -> FieldAccess) is built once
at construction.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from translatable.configuration import get_settings
from translatable.records.errors import InvalidModelConfigError


class FieldAccess(Enum):
    """Where reads and writes of an attribute are routed."""

    TRANSLATED = "translated"
    DIRECT = "direct"


def _default_locale_key() -> str:
    return get_settings().locale.LOCALE_KEY


class TranslatableModel(BaseModel):
    """Declaration of a translatable entity.

    Attributes:
        name: Entity name (e.g. "product"); used to derive table names.
        table: Base table (default: ``f"{name}s"``).
        translation_table: Translation table (default: ``f"{name}_translations"``).
        primary_key: Base table primary key column.
        translated_attributes: Ordered names of translated attributes.
        translation_foreign_key: Column on translation rows referencing the
            base row; derived when omitted (see ``relation_key``).
        locale_key: Column holding the locale on translation rows.

    Example:
        product = TranslatableModel(
            name="product",
            translated_attributes=("title", "description"),
        )
        product.relation_key  # "product_id"
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    table: str = ""
    translation_table: str = ""
    primary_key: str = "id"
    translated_attributes: Tuple[str, ...]
    translation_foreign_key: Optional[str] = None
    locale_key: str = Field(default_factory=_default_locale_key)

    _accessors: Dict[str, FieldAccess] = PrivateAttr(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _derive_table_names(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("name"):
            data = dict(data)
            data["table"] = data.get("table") or f"{data['name']}s"
            data["translation_table"] = (
                data.get("translation_table") or f"{data['name']}_translations"
            )
        return data

    @model_validator(mode="after")
    def _check_attributes(self) -> "TranslatableModel":
        attributes = self.translated_attributes
        if not attributes:
            raise InvalidModelConfigError(
                f"{self.name!r} declares no translated attributes"
            )
        if len(set(attributes)) != len(attributes):
            raise InvalidModelConfigError(
                f"{self.name!r} declares a translated attribute twice"
            )
        reserved = {self.primary_key, self.locale_key, self.relation_key}
        clashing = sorted(reserved.intersection(attributes))
        if clashing:
            raise InvalidModelConfigError(
                f"{self.name!r} cannot translate key columns: {', '.join(clashing)}"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._accessors = {
            attribute: FieldAccess.TRANSLATED for attribute in self.translated_attributes
        }

    @property
    def relation_key(self) -> str:
        """Foreign key column on translation rows.

        The explicit ``translation_foreign_key``, else the primary key when it
        is not the conventional "id", else ``f"{name}_{primary_key}"``.
        """
        if self.translation_foreign_key:
            return self.translation_foreign_key
        if self.primary_key != "id":
            return self.primary_key
        return f"{self.name}_{self.primary_key}"

    def access_for(self, attribute: str) -> FieldAccess:
        return self._accessors.get(attribute, FieldAccess.DIRECT)

    def is_translated(self, attribute: str) -> bool:
        return self.access_for(attribute) is FieldAccess.TRANSLATED
