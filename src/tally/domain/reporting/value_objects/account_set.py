"""Account set value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class AccountSet:
    """Sorted, de-duplicated set of account ids a report runs over.

    Order of the input never matters: two sets built from the same ids in any
    order compare equal and iterate identically.
    """

    ids: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for account_id in self.ids:
            if isinstance(account_id, bool) or not isinstance(account_id, int):
                msg = f"Account ids must be integers, got {account_id!r}"
                raise TypeError(msg)
        object.__setattr__(self, "ids", tuple(sorted(set(self.ids))))

    @classmethod
    def of(cls, account_ids: Iterable[int]) -> AccountSet:
        return cls(ids=tuple(account_ids))

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self.ids

    def to_list(self) -> list[int]:
        return list(self.ids)
