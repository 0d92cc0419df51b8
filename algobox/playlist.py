"""A circular music playlist with a play cursor, plus an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Sequence

__all__ = ["EmptyPlaylistError", "Playlist", "main"]


class EmptyPlaylistError(LookupError):
    """Raised when an operation needs a song but the playlist has none."""


class Playlist:
    """Songs kept in a ring, with a cursor on the song now playing.

    Removing a song makes the song after it the head of the playlist.
    """

    def __init__(self) -> None:
        self._songs: list[str] = []
        self._current: int | None = None

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._songs)

    @property
    def current(self) -> str | None:
        """The song under the play cursor, or None when the playlist is empty."""
        return None if self._current is None else self._songs[self._current]

    def _require_songs(self) -> None:
        if not self._songs:
            raise EmptyPlaylistError("the playlist is empty")

    def add(self, name: str) -> None:
        """Append a song at the end; the first song added becomes current."""
        self._songs.append(name)
        if self._current is None:
            self._current = 0

    def remove(self, name: str) -> None:
        """Remove the first song called name, counting from the head.

        The song that followed it becomes the new head. Raises
        EmptyPlaylistError on an empty playlist and KeyError if no song has
        that name.
        """
        self._require_songs()
        try:
            index = self._songs.index(name)
        except ValueError:
            raise KeyError(name) from None
        del self._songs[index]
        if not self._songs:
            self._current = None
            return
        size = len(self._songs)
        current = self._current if self._current is not None else 0
        if current > index:
            current -= 1
        elif current == index:
            current = index % size
        shift = index % size
        self._songs = self._songs[shift:] + self._songs[:shift]
        self._current = (current - shift) % size

    def next_song(self) -> str:
        """Move the cursor forward one song, wrapping round, and return it."""
        self._require_songs()
        assert self._current is not None
        self._current = (self._current + 1) % len(self._songs)
        return self._songs[self._current]

    def previous_song(self) -> str:
        """Move the cursor back one song, wrapping round, and return it."""
        self._require_songs()
        assert self._current is not None
        self._current = (self._current - 1) % len(self._songs)
        return self._songs[self._current]

    def first(self) -> str:
        """Return the song at the head of the playlist."""
        self._require_songs()
        return self._songs[0]

    def last(self) -> str:
        """Return the song just before the head, at the end of the ring."""
        self._require_songs()
        return self._songs[-1]

    def find(self, name: str) -> str | None:
        """Return the song called name if the playlist holds it, else None."""
        return name if name in self._songs else None

    def songs(self) -> list[str]:
        """Return the songs from the head onwards."""
        return list(self._songs)


_MENU = """
-----Song Playlist Application-----
1. Add Music
2. Remove Music
3. Show Playlist
4. Play next file
5. Play previous file,
6. Play first file
7. Play Last file
8. Play specific file.
9. Exit
"""


def _add(playlist: Playlist) -> None:
    playlist.add(input("Enter Music Name:\n"))


def _remove(playlist: Playlist) -> None:
    if not playlist:
        print("No Music is there to delete!")
        return
    name = input("Enter Music Name to delete:\n")
    print()
    try:
        playlist.remove(name)
    except KeyError:
        print("No Music file is there!")
        return
    if playlist:
        print("Music deleted!")
    else:
        print("One file deleted! Playlist is Empty Now!")


def _show(playlist: Playlist) -> None:
    if not playlist:
        print("Playlist is Empty!")
        return
    print()
    print("Displaying Playlist :")
    for number, song in enumerate(playlist.songs(), start=1):
        print(f"Song {number} : {song}")


def _step(move: Callable[[Playlist], str], label: str) -> Callable[[Playlist], None]:
    def run(playlist: Playlist) -> None:
        try:
            song = move(playlist)
        except EmptyPlaylistError:
            print("No songs in Playlist!")
            return
        print(f"Playing {label} Song : {song}")

    return run


def _end(pick: Callable[[Playlist], str], label: str) -> Callable[[Playlist], None]:
    def run(playlist: Playlist) -> None:
        try:
            song = pick(playlist)
        except EmptyPlaylistError:
            print("Playlist is Empty!")
            return
        print(f"Playing {label} Music : {song}")

    return run


def _play_specific(playlist: Playlist) -> None:
    if not playlist:
        print("No music is there to be searched!")
        return
    name = input("Enter Music Name to play:\n")
    print()
    song = playlist.find(name)
    if song is None:
        print("There is no Music file with this name!")
        return
    print("Music Found!")
    print(f"Playing Music : {song}")


_ACTIONS: dict[int, Callable[[Playlist], None]] = {
    1: _add,
    2: _remove,
    3: _show,
    4: _step(Playlist.next_song, "Next"),
    5: _step(Playlist.previous_song, "Previous"),
    6: _end(Playlist.first, "First"),
    7: _end(Playlist.last, "Last"),
    8: _play_specific,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the playlist menu on standard input until the user exits."""
    argparse.ArgumentParser(description="Build and play a music playlist.").parse_args(argv)
    playlist = Playlist()
    while True:
        print(_MENU)
        try:
            choice = int(input().strip())
        except (ValueError, EOFError):
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            return 0
        try:
            action(playlist)
        except EOFError:
            return 0