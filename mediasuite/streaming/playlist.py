from __future__ import annotations

from typing import Iterator, Union

from mediasuite.errors import PlaylistError
from mediasuite.streaming.sources.base import Chunk, MediaSource


class MediaFileItem:
    def __init__(self, source: MediaSource, title: str) -> None:
        self.source = source
        self.title = title

    def stream(self) -> Iterator[Chunk]:
        return self.source.stream()

    def leaves(self) -> Iterator[MediaFileItem]:
        yield self

    def __repr__(self) -> str:
        return f"MediaFileItem(title={self.title!r}, source={self.source.id!r})"


class Playlist:
    def __init__(self, title: str) -> None:
        self.title = title
        self._items: list[MediaItem] = []

    def add(self, item: MediaItem) -> Playlist:
        if item is self or (isinstance(item, Playlist) and item.contains(self)):
            raise PlaylistError(
                "adding item would create a cycle", playlist=self.title, item=item.title
            )
        self._items.append(item)
        return self

    def contains(self, target: MediaItem) -> bool:
        stack: list[MediaItem] = list(self._items)
        while stack:
            item = stack.pop()
            if item is target:
                return True
            if isinstance(item, Playlist):
                stack.extend(item._items)
        return False

    def leaves(self) -> Iterator[MediaFileItem]:
        # Depth-first, left to right, on an explicit stack so nesting depth
        # is not limited by the interpreter's recursion limit.
        stack: list[MediaItem] = list(reversed(self._items))
        while stack:
            item = stack.pop()
            if isinstance(item, MediaFileItem):
                yield item
            else:
                stack.extend(reversed(item._items))

    def stream(self) -> Iterator[Chunk]:
        for leaf in self.leaves():
            yield from leaf.stream()

    def __iter__(self) -> Iterator[MediaItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Playlist(title={self.title!r}, items={len(self._items)})"


MediaItem = Union[MediaFileItem, Playlist]
