from typing import NamedTuple


class WorkItem(NamedTuple):
    """A URL waiting to be fetched, with the number of hops still allowed below it."""
    url: str
    depth: int
