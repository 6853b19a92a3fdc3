"""Capability index over a validated capability catalog."""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from modelcaps.catalog import AVAILABLE_MODELS, list_models
from modelcaps.types import ModelCapability, ModelProvider, index_key
from modelcaps.validation import validate_or_raise

logger = logging.getLogger(__name__)


class CapabilityIndex:
    """Read-only map from ``(provider, model_id)`` to a capability record.

    Construction always validates: an index never holds an incomplete
    record, an unknown provider or a repeated pair. The ``provider/model_id``
    string is only used for display.
    """

    def __init__(self, models: Iterable[ModelCapability]) -> None:
        models = tuple(models)
        validate_or_raise(models)
        self._models: tuple[ModelCapability, ...] = models
        self._by_key = MappingProxyType({m.index_key: m for m in models})

    @classmethod
    def build(cls, models: Iterable[ModelCapability]) -> CapabilityIndex:
        """Validate *models* and index them.

        Raises :class:`~modelcaps.errors.CatalogError` if any record is
        incomplete, names an unknown provider, or repeats a provider and
        model id pair.
        """
        index = cls(models)
        logger.debug("Built capability index with %d models", len(index))
        return index

    def lookup(
        self, provider: ModelProvider | str, model_id: str
    ) -> ModelCapability | None:
        """Return the record for this exact pair, or ``None``.

        A provider that is not a ModelProvider member matches nothing.
        """
        key = index_key(provider, model_id)
        if key is None:
            return None
        return self._by_key.get(key)

    @property
    def models(self) -> tuple[ModelCapability, ...]:
        """Records in catalog order."""
        return self._models

    def keys(self) -> list[str]:
        """Display keys (``provider/model_id``) in catalog order."""
        return [m.composite_key for m in self._models]

    def list_models(
        self, provider: ModelProvider | str | None = None
    ) -> list[ModelCapability]:
        return list_models(provider, self._models)

    def __contains__(self, key: object) -> bool:
        # (provider, model_id) pairs
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.lookup(*key) is not None

    def __iter__(self) -> Iterator[ModelCapability]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)


def load_index(models: Iterable[ModelCapability] = AVAILABLE_MODELS) -> CapabilityIndex:
    """Build the process index over the built-in catalog.

    Call once during startup and pass the result to whoever needs lookups.
    """
    return CapabilityIndex.build(models)


class CapabilityRegistry:
    """Capability index that also accepts models registered at runtime.

    Writers serialize on a lock and publish a freshly validated snapshot.
    Readers never lock; they always see a complete snapshot.
    """

    def __init__(self, index: CapabilityIndex | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = index if index is not None else load_index()

    def snapshot(self) -> CapabilityIndex:
        """Return the current immutable index."""
        return self._snapshot

    def lookup(
        self, provider: ModelProvider | str, model_id: str
    ) -> ModelCapability | None:
        return self._snapshot.lookup(provider, model_id)

    def register(self, model: ModelCapability) -> CapabilityIndex:
        """Add one model; raises CatalogError if it is invalid or a duplicate."""
        return self.register_many([model])

    def register_many(self, models: Iterable[ModelCapability]) -> CapabilityIndex:
        """Add several models atomically: either all are added or none."""
        new_models = list(models)
        with self._lock:
            snapshot = CapabilityIndex.build(self._snapshot.models + tuple(new_models))
            self._snapshot = snapshot
        for model in new_models:
            logger.info("Registered model %s", model.composite_key)
        return snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
