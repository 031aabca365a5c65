"""Bridge to a relay hosted in a separate worker process.

The UI process never performs network I/O in this mode: descriptors are
sent to a spawned worker as plain dicts, the worker runs the HTTP relay,
and a reply dict comes back holding the result (or the relay's picklable
error) plus the relay's trace lines, which are replayed on this side.

Hidden design decisions:
- Process start method (spawn, so no Textual/asyncio state is forked)
- Executor lifetime (created on first use, torn down on close)
- Wire form of descriptors and results (pydantic JSON-mode dumps)
"""

import asyncio
import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from typing import Any

from .base import Bridge
from .models import RelayResult, RequestDescriptor


def _execute_in_worker(payload: dict[str, Any]) -> dict[str, Any]:
    """Worker-process entry point: run one descriptor through HttpRelay.

    Returns:
        ``{"result": <RelayResult dict> | None, "error": RelayError | None,
        "trace": [(level, component, message), ...]}``
    """
    return asyncio.run(_execute(payload))


async def _execute(payload: dict[str, Any]) -> dict[str, Any]:
    # Imported here so only the worker process loads the HTTP stack
    from ..relay.errors import RelayError
    from ..relay.http import HttpRelay

    trace: list[tuple[str, str, str]] = []
    descriptor = RequestDescriptor.model_validate(payload)
    async with HttpRelay() as relay:
        relay.set_debug_callback(lambda level, component, message: trace.append((level, component, message)))
        try:
            result = await relay.execute(descriptor)
        except RelayError as e:
            return {"result": None, "error": e, "trace": trace}
    return {"result": result.model_dump(mode="json"), "error": None, "trace": trace}


class ProcessBridge(Bridge):
    """Bridge whose relay runs in a worker process pool.

    The pool does not serialize calls: if several descriptors were
    delivered at once, up to ``max_workers`` would run concurrently.
    Single-flight is the caller's convention.
    """

    def __init__(self, max_workers: int = 1) -> None:
        super().__init__()
        self._max_workers = max_workers
        self._executor: ProcessPoolExecutor | None = None

    def _get_executor(self) -> ProcessPoolExecutor:
        if self._executor is None:
            self._executor = ProcessPoolExecutor(
                max_workers=self._max_workers,
                mp_context=multiprocessing.get_context("spawn"),
            )
            self._debug("info", f"Relay worker pool started (max_workers={self._max_workers})")
        return self._executor

    def _replay(self, trace: list[tuple[str, str, str]]) -> None:
        if self._debug_callback is None:
            return
        for level, component, message in trace:
            self._debug_callback(level, component, message)

    async def invoke(self, descriptor: RequestDescriptor) -> RelayResult:
        self._debug("debug", f"invoke {descriptor.method.value} {descriptor.endpoint}")
        loop = asyncio.get_running_loop()
        payload = descriptor.model_dump(mode="json")
        try:
            reply = await loop.run_in_executor(self._get_executor(), _execute_in_worker, payload)
        except Exception as e:
            self._debug("error", f"relay worker failed: {e}")
            raise

        self._replay(reply["trace"])
        if reply["error"] is not None:
            self._debug("error", f"relay failed: {reply['error']}")
            raise reply["error"]
        return RelayResult.model_validate(reply["result"])

    async def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
