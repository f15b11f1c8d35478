"""
Persistent id -> entity map over a single model table.

Every collection of the registry is accessed through an :class:`EntityStore`
so that the views only ever do map-style operations: look one id up, insert,
overwrite, remove or scan the values.  Each mutation writes an audit event in
the same transaction.
"""
from __future__ import annotations

from typing import Any, Optional

from django.db import models, transaction
from django.utils import timezone

from registry.services.audit import log_action


class EntityStore:

    def __init__(self, model: type[models.Model], label: str):
        self.model = model
        self.label = label

    def _ordered(self):
        return self.model.objects.order_by('created_at', 'id')

    def get(self, entity_id: str) -> Optional[models.Model]:
        return self.model.objects.filter(pk=entity_id).first()

    def values(self, **lookups: Any) -> list[models.Model]:
        """All entities, optionally narrowed by equality lookups, oldest first."""
        return list(self._ordered().filter(**lookups))

    def page(self, page: int, limit: int) -> list[models.Model]:
        """One ``limit``-sized slice, ``[]`` once ``page`` runs past the end."""
        start = (page - 1) * limit
        # the offset must fit a 64-bit SQL OFFSET
        if start >= self.model.objects.count():
            return []
        return list(self._ordered()[start:start + limit])

    def insert(self, fields: dict[str, Any]) -> models.Model:
        with transaction.atomic():
            obj = self.model.objects.create(**fields)
            log_action(action=f'{self.label}.create', object_type=self.label, object_id=obj.pk)
        return obj

    def update(self, entity_id: str, fields: dict[str, Any]) -> Optional[models.Model]:
        """Merge ``fields`` over the stored entity and stamp ``updated_at``.

        Returns ``None`` when no entity has this id.
        """
        with transaction.atomic():
            obj = self.model.objects.select_for_update().filter(pk=entity_id).first()
            if obj is None:
                return None
            for name, value in fields.items():
                setattr(obj, name, value)
            obj.updated_at = timezone.now()
            obj.save()
            log_action(
                action=f'{self.label}.update', object_type=self.label, object_id=obj.pk,
                detail={'fields': sorted(fields)},
            )
        return obj

    def remove(self, entity_id: str) -> Optional[models.Model]:
        """Delete the entity and hand back its last stored state."""
        with transaction.atomic():
            obj = self.model.objects.select_for_update().filter(pk=entity_id).first()
            if obj is None:
                return None
            # Queryset delete leaves ``obj.pk`` intact for the response.
            self.model.objects.filter(pk=obj.pk).delete()
            log_action(action=f'{self.label}.delete', object_type=self.label, object_id=obj.pk)
        return obj
