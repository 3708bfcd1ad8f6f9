"""Persistence adapter: save/load the session plan under one storage key, export it as JSON."""
import json
import logging
from typing import Optional

from wedding.domain.WeddingPlan import WeddingPlan
from wedding.domain.errors import DeserializationError
from wedding.events.Event_Bus import EventBus
from wedding.events.event_helpers import publish_load_failed, publish_plan_saved
from wedding.infra.KeyValue_Store import JsonFileKeyValueStore, KeyValueStore
from wedding.infra.paths import STORAGE_FILE
from wedding.utilities.config import PLAN_STORAGE_KEY

logger = logging.getLogger(__name__)


class LoadResult:
    """Outcome of reading the stored plan: a plan, an error, or neither (nothing stored)."""

    def __init__(self, plan: Optional[WeddingPlan] = None, error: Optional[DeserializationError] = None):
        self.plan = plan
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.plan is not None

    def __repr__(self) -> str:
        if self.error is not None:
            return f"LoadResult(error={self.error})"
        return f"LoadResult(plan={self.plan!r})"


def parse_plan(raw) -> WeddingPlan:
    """Parse a JSON document (str or bytes) into a plan. Raises DeserializationError."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DeserializationError(f"Plan is not valid JSON: {e}") from e
    return WeddingPlan.from_dict(data)


def serialize_plan(plan: WeddingPlan, indent: Optional[int] = None) -> str:
    return json.dumps(plan.to_dict(), indent=indent, ensure_ascii=False)


class PlanRepository:
    def __init__(self, storage: Optional[KeyValueStore] = None, key: str = PLAN_STORAGE_KEY,
                 event_bus: Optional[EventBus] = None):
        self.storage = storage if storage is not None else JsonFileKeyValueStore(STORAGE_FILE)
        self.key = key
        self._event_bus = event_bus

    def save(self, plan: WeddingPlan) -> None:
        '''
        Writes the full plan under the storage key, overwriting any previous record.
        '''
        self.storage.set(self.key, serialize_plan(plan))
        logger.info(f"Saved wedding plan under '{self.key}'")
        publish_plan_saved(self.key, bus=self._event_bus)

    def load_result(self) -> LoadResult:
        '''
        Reads the stored plan without side effects, reporting a malformed
        record as an error instead of raising.
        '''
        try:
            raw = self.storage.get(self.key)
            if raw is None:
                return LoadResult()
            return LoadResult(plan=parse_plan(raw))
        except DeserializationError as e:
            return LoadResult(error=e)

    def load(self) -> Optional[WeddingPlan]:
        '''
        Returns the stored plan, or None when nothing usable is stored. A
        malformed record is logged, announced on the event bus and discarded.
        '''
        result = self.load_result()
        if result.error is not None:
            logger.warning(f"Discarding unreadable wedding plan stored under '{self.key}': {result.error}")
            self.storage.delete(self.key)
            publish_load_failed(self.key, result.error, bus=self._event_bus)
            return None
        if result.plan is not None:
            logger.info(f"Loaded wedding plan from '{self.key}'")
        return result.plan

    @staticmethod
    def export(plan: WeddingPlan) -> bytes:
        """Serialize the plan as a downloadable JSON document; storage is not touched."""
        return serialize_plan(plan, indent=2).encode("utf-8")

    @staticmethod
    def import_plan(data) -> WeddingPlan:
        """Parse an exported document. Raises DeserializationError on malformed input."""
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DeserializationError(f"Plan file is not UTF-8: {e}") from e
        return parse_plan(data)
