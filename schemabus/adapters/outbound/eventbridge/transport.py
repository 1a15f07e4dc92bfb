"""
EventBridge transport using the AWS PutEvents API.
https://docs.aws.amazon.com/eventbridge/latest/APIReference/API_PutEvents.html
"""

import logging
import threading
import time
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ....application.ports.transport import TransportEntryResult
from ....domain.exceptions import TransportDispatchError

logger = logging.getLogger(__name__)


class EventBridgeTransport:
    """
    Sends entry batches to Amazon EventBridge.

    The boto3 client is created lazily unless one is injected. Creation is
    guarded by a lock so concurrent first calls share one client; boto3
    clients are safe to share between threads after that.

    Example:
        transport = EventBridgeTransport(region_name="eu-west-1")
        results = transport.send([{"Source": "shop", ...}])
    """

    def __init__(
        self,
        client: Any = None,
        region_name: str | None = None,
        profile_name: str | None = None,
        config: Config | None = None,
    ) -> None:
        self._client = client
        self._region_name = region_name
        self._profile_name = profile_name
        self._config = config or Config(retries={"max_attempts": 3, "mode": "standard"})
        self._client_lock = threading.Lock()

    @property
    def client(self) -> Any:
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    logger.info(f"Creating EventBridge client for region {self._region_name}")
                    session = boto3.Session(
                        profile_name=self._profile_name,
                        region_name=self._region_name,
                    )
                    self._client = session.client("events", config=self._config)
        return self._client

    def send(self, entries: list[dict[str, Any]]) -> list[TransportEntryResult]:
        """
        Send one batch through PutEvents.

        Raises:
            TransportDispatchError: When the call itself fails
        """
        start_time = time.perf_counter()
        try:
            response = self.client.put_events(Entries=entries)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "ClientError")
            logger.error(f"PutEvents failed with {code}: {e}")
            raise TransportDispatchError(error.get("Message") or str(e), error_code=code) from e
        except BotoCoreError as e:
            logger.error(f"PutEvents failed: {e}")
            raise TransportDispatchError(str(e), error_code=type(e).__name__) from e

        elapsed = time.perf_counter() - start_time
        failed = response.get("FailedEntryCount", 0)
        logger.debug(
            f"PutEvents sent {len(entries)} entries in {elapsed:.3f}s, {failed} failed"
        )

        return [TransportEntryResult.from_response_entry(e) for e in response.get("Entries", [])]
