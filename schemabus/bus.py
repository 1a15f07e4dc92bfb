"""
Bus - publishes envelopes to an event bus in size-guarded batches.

Example:
    from schemabus import Bus, EventDefinition
    from schemabus.adapters.outbound.eventbridge import EventBridgeTransport

    bus = Bus("orders", EventBridgeTransport(region_name="eu-west-1"))
    order_created = EventDefinition(
        name="OrderCreated",
        bus=bus,
        source="shop.orders",
        schema={"type": "object", "required": ["order_id"]},
    )

    result = bus.put([order_created.create({"order_id": str(i)}) for i in range(25)])
    for outcome in result.failed:
        print(outcome.index, outcome.kind, outcome.error_code)
"""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from .application.ports.transport import EventTransport, TransportEntryResult
from .application.services.batcher import DEFAULT_MAX_BATCH_SIZE, partition
from .application.services.size_guard import DEFAULT_MAX_ENTRY_BYTES, SizeGuard
from .domain.envelope import Envelope
from .domain.exceptions import PayloadTooLargeError, TransportDispatchError
from .domain.results import EntryOutcome, PublishResult
from .infrastructure.logging import LoggerAdapter, setup_logging

if TYPE_CHECKING:
    from .event import EventDefinition

logger = logging.getLogger(__name__)

_Indexed = tuple[int, Envelope]


class Bus:
    """
    A named event bus that owns its transport.

    `put` is best effort across the whole submitted sequence: envelopes that
    are too large, rejected by the transport, or part of a batch whose
    transport call failed are reported in the returned PublishResult instead
    of aborting the call. Batches are dispatched one after another.

    Args:
        name: Event bus name, copied to every outgoing entry
        transport: EventTransport implementation, owned by this bus
        max_batch_size: Entries per transport call, at most 10
        max_entry_bytes: Per-entry size ceiling

    Raises:
        ValueError: If name is empty or max_batch_size is outside 1..10
    """

    def __init__(
        self,
        name: str,
        transport: EventTransport,
        *,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        max_entry_bytes: int = DEFAULT_MAX_ENTRY_BYTES,
    ) -> None:
        if not name:
            raise ValueError("Bus name cannot be empty")
        if not 1 <= max_batch_size <= DEFAULT_MAX_BATCH_SIZE:
            raise ValueError(
                f"max_batch_size must be between 1 and {DEFAULT_MAX_BATCH_SIZE}, "
                f"got {max_batch_size}"
            )
        self.name = name
        self._transport = transport
        self.max_batch_size = max_batch_size
        self._size_guard = SizeGuard(max_entry_bytes)
        self._log = LoggerAdapter(logger, {"event_bus_name": name})

    @classmethod
    def from_env(cls, name: str | None = None, client: Any = None, **overrides: Any) -> "Bus":
        """
        Build a Bus backed by EventBridge from environment configuration.

        Also applies SCHEMABUS_LOG_LEVEL to the schemabus loggers.

        Args:
            name: Bus name (default: SCHEMABUS_BUS_NAME)
            client: Optional pre-built boto3 events client
            **overrides: Overrides passed to load_bus_config

        Raises:
            ValueError: If the configured batch size is outside 1..10
        """
        from .adapters.outbound.eventbridge import EventBridgeTransport
        from .config import load_bus_config

        config = load_bus_config(name, **overrides)
        setup_logging(config["log_level"])
        transport = EventBridgeTransport(
            client=client,
            region_name=config["aws_region"],
            profile_name=config.get("aws_profile"),
        )
        return cls(
            config["bus_name"],
            transport,
            max_batch_size=config["max_batch_size"],
            max_entry_bytes=config["max_entry_bytes"],
        )

    @property
    def transport(self) -> EventTransport:
        return self._transport

    @property
    def max_entry_bytes(self) -> int:
        return self._size_guard.max_entry_bytes

    def __repr__(self) -> str:
        return f"Bus(name={self.name!r})"

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    def put(self, envelopes: Iterable[Envelope]) -> PublishResult:
        """
        Publish envelopes and report one outcome per envelope.

        Args:
            envelopes: Envelopes in submission order

        Returns:
            PublishResult covering every submitted envelope exactly once
        """
        submitted = list(envelopes)
        outcomes, survivors = self._screen(submitted)

        batches = partition(survivors, self.max_batch_size)
        for number, batch in enumerate(batches, start=1):
            self._log.debug(f"Dispatching batch {number}/{len(batches)} ({len(batch)} entries)")
            try:
                results = self._send(batch)
            except Exception as e:
                outcomes.extend(self._fail_batch(batch, e))
                continue
            outcomes.extend(self._reconcile(batch, results))

        return self._finish(submitted, outcomes, len(batches))

    async def put_async(self, envelopes: Iterable[Envelope]) -> PublishResult:
        """
        Publish envelopes without blocking the event loop.

        Each transport call runs in a worker thread. If the calling task is
        cancelled, a call already in flight still completes in its thread,
        no further batch is dispatched, and CancelledError propagates.
        """
        submitted = list(envelopes)
        outcomes, survivors = self._screen(submitted)

        batches = partition(survivors, self.max_batch_size)
        for number, batch in enumerate(batches, start=1):
            self._log.debug(f"Dispatching batch {number}/{len(batches)} ({len(batch)} entries)")
            try:
                results = await asyncio.to_thread(self._send, batch)
            except asyncio.CancelledError:
                self._log.warning(f"put cancelled after {number - 1}/{len(batches)} batches")
                raise
            except Exception as e:
                outcomes.extend(self._fail_batch(batch, e))
                continue
            outcomes.extend(self._reconcile(batch, results))

        return self._finish(submitted, outcomes, len(batches))

    def _screen(self, submitted: Sequence[Envelope]) -> tuple[list[EntryOutcome], list[_Indexed]]:
        """Split submitted envelopes into size failures and dispatchable ones."""
        outcomes: list[EntryOutcome] = []
        survivors: list[_Indexed] = []
        for index, envelope in enumerate(submitted):
            try:
                self._size_guard.check(envelope)
            except PayloadTooLargeError as e:
                self._log.warning(f"Dropping entry {index} ({envelope.detail_type}): {e.message}")
                outcomes.append(EntryOutcome.too_large(index, envelope, e))
                continue
            survivors.append((index, envelope))
        return outcomes, survivors

    def _send(self, batch: list[_Indexed]) -> list[TransportEntryResult]:
        entries = [envelope.to_entry(self.name) for _, envelope in batch]
        results = list(self._transport.send(entries))
        if len(results) != len(batch):
            raise TransportDispatchError(
                f"Transport returned {len(results)} results for {len(batch)} entries",
                error_code="ResponseMismatch",
            )
        return results

    def _reconcile(
        self, batch: list[_Indexed], results: list[TransportEntryResult]
    ) -> list[EntryOutcome]:
        """Attribute positional transport results to their submission index."""
        outcomes = []
        for (index, envelope), result in zip(batch, results):
            if result.is_success:
                outcomes.append(EntryOutcome.accepted(index, envelope, result.event_id))
            else:
                self._log.warning(
                    f"Entry {index} ({envelope.detail_type}) rejected: {result.error_code}"
                )
                outcomes.append(
                    EntryOutcome.rejected(index, envelope, result.error_code, result.error_message)
                )
        return outcomes

    def _fail_batch(self, batch: list[_Indexed], error: Exception) -> list[EntryOutcome]:
        if isinstance(error, TransportDispatchError):
            self._log.error(
                f"Batch of {len(batch)} entries failed: {error.error_code}: {error.message}"
            )
        else:
            self._log.exception(f"Batch of {len(batch)} entries failed: {error}")
            error = TransportDispatchError(str(error), error_code=type(error).__name__)
        return [EntryOutcome.transport_error(index, envelope, error) for index, envelope in batch]

    def _finish(
        self, submitted: Sequence[Envelope], outcomes: list[EntryOutcome], batch_count: int
    ) -> PublishResult:
        result = PublishResult(outcomes=outcomes, batch_count=batch_count)
        if submitted:
            self._log.info(
                f"Published {len(result.accepted)}/{len(submitted)} entries "
                f"in {batch_count} batches"
            )
        return result

    # ------------------------------------------------------------------
    # Rule patterns
    # ------------------------------------------------------------------

    def compute_pattern(self, definitions: Iterable["EventDefinition"]) -> dict[str, list[str]]:
        """
        Build one rule pattern matching any of the given event definitions.

        Raises:
            ValueError: If a definition belongs to another bus
        """
        sources: list[str] = []
        detail_types: list[str] = []
        for definition in definitions:
            if definition.bus is not self:
                raise ValueError(
                    f"Event '{definition.name}' is attached to bus "
                    f"'{definition.bus.name}', not '{self.name}'"
                )
            if definition.source not in sources:
                sources.append(definition.source)
            if definition.name not in detail_types:
                detail_types.append(definition.name)
        return {"source": sources, "detail-type": detail_types}
