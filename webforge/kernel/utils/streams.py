"""Async asset-stream combinators."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import Any

from webforge.kernel.domain.asset import Asset
from webforge.kernel.ports.assets import AssetStream, AssetTransform

_DONE = object()


async def merge_streams(*streams: AssetStream) -> AsyncIterator[Asset]:
    """Interleave several asset streams into one.

    Each input is drained by its own task. The first error raised by any
    input is re-raised to the consumer, and the remaining inputs are
    cancelled.
    """
    queue: asyncio.Queue[tuple[Any, BaseException | None]] = asyncio.Queue()

    async def pump(stream: AssetStream) -> None:
        try:
            async for asset in stream:
                await queue.put((asset, None))
        except Exception as e:
            await queue.put((None, e))
        else:
            await queue.put((_DONE, None))

    tasks = [asyncio.create_task(pump(stream)) for stream in streams]
    remaining = len(tasks)
    try:
        while remaining:
            item, error = await queue.get()
            if error is not None:
                raise error
            if item is _DONE:
                remaining -= 1
                continue
            yield item
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


def when(
    predicate: Callable[[Asset], bool], fn: Callable[[Asset], Awaitable[Asset]]
) -> AssetTransform:
    """Apply ``fn`` to assets matching ``predicate``; pass the rest through."""

    async def transform(stream: AssetStream) -> AsyncIterator[Asset]:
        async for asset in stream:
            yield await fn(asset) if predicate(asset) else asset

    return transform


def on_paths(paths: Iterable[str], fn: Callable[[Asset], Awaitable[Asset]]) -> AssetTransform:
    """Apply ``fn`` to the assets at the given paths."""
    wanted = frozenset(paths)
    return when(lambda asset: asset.path in wanted, fn)


async def iterate(assets: Iterable[Asset]) -> AsyncIterator[Asset]:
    """Turn an in-memory collection into an asset stream."""
    for asset in assets:
        yield asset
