"""Store plumbing shared by the in-memory and SQL backends.

The ACL core never knows which backend it is talking to: in-memory
stores answer synchronously, the ``postgres`` repositories answer with
coroutines. Every store call goes through :func:`resolve`.
"""

from __future__ import annotations

from inspect import isawaitable
from typing import Awaitable, TypeVar, Union

T = TypeVar("T")

# Return type of a store method that either backend may implement.
MaybeAwaitable = Union[T, Awaitable[T]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Return ``value``, awaiting it first when a SQL repository produced it.

        owners = await resolve(owner_attribute.get_all())
    """
    if isawaitable(value):
        return await value  # type: ignore[return-value]
    return value  # type: ignore[return-value]
