"""Query scope restricting base-record queries by translated values."""

from typing import Any, Optional

from translatable.persistence import QueryBuilder, RelatedPredicate
from translatable.records.errors import UnknownTranslatedFieldError
from translatable.records.models import TranslatableModel


class QueryScope:
    """Builds translation exists-predicates for one model.

    Example:
        scope = QueryScope(product)
        query = scope.filter_by_translation(store.query("products"), "title", "Hello", locale="en")
        query = query.where("active", True)
    """

    def __init__(self, model: TranslatableModel):
        self.model = model

    def related_predicate(self) -> RelatedPredicate:
        """Predicate matching any translation row of the owner base row."""
        return RelatedPredicate(
            table=self.model.translation_table,
            foreign_key=self.model.relation_key,
            owner_key=self.model.primary_key,
        )

    def filter_by_translation(
        self,
        query: QueryBuilder,
        field: str,
        value: Any,
        locale: Optional[str] = None,
    ) -> QueryBuilder:
        """Restrict ``query`` to base rows with a translation where ``field == value``.

        When ``locale`` is given the matching translation must also be in that
        locale. Returns a new query; nothing is loaded.

        Raises:
            UnknownTranslatedFieldError: If ``field`` is not translated.
        """
        if not self.model.is_translated(field):
            raise UnknownTranslatedFieldError(self.model.name, field)

        predicate = self.related_predicate().where(field, value)
        if locale:
            predicate = predicate.where(self.model.locale_key, locale)
        return query.where_exists(predicate)
