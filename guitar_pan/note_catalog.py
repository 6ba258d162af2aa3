"""Catalog of the twenty playable notes.

The catalog is a fixed, read-only table built once at import time. Each note
has a stable integer id (its position in the table, which is also the index
the audio engine uses for its frequency table), a canonical name, a
frequency and optional enharmonic spellings. Every spelling resolves to the
same entry, and every id resolves back to exactly one canonical name.
"""

from types import MappingProxyType

import pretty_midi
from pydantic import BaseModel, ConfigDict, Field


class UnknownNoteError(KeyError):
    """Raised when a note name or id is not in the catalog."""


class MusicalNote(BaseModel):
    """One catalog entry.

    Attributes:
        id: Stable note id (table position).
        name: Canonical spelling, e.g. "D#3".
        frequency: Fundamental frequency in Hz.
        aliases: Alternate spellings, e.g. ("Eb3",).
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0)
    name: str
    frequency: float = Field(..., gt=0.0)
    aliases: tuple[str, ...] = ()

    @property
    def midi_number(self) -> int:
        """MIDI note number of the canonical spelling (C4 = 60)."""
        return pretty_midi.note_name_to_number(self.name)

    @property
    def spellings(self) -> tuple[str, ...]:
        return (self.name,) + self.aliases


# (canonical name, frequency in Hz, alternate spellings); order defines ids
_NOTE_TABLE = (
    ("C#3", 138.59, ()),
    ("D3", 146.83, ()),
    ("D#3", 155.56, ("Eb3",)),
    ("E3", 164.81, ()),
    ("F3", 174.61, ()),
    ("F#3", 185.00, ()),
    ("G3", 196.00, ()),
    ("G#3", 207.65, ("Ab3",)),
    ("A3", 220.00, ()),
    ("A#3", 233.08, ("Bb3",)),
    ("B3", 246.94, ()),
    ("C4", 261.63, ()),
    ("C#4", 277.18, ()),
    ("D4", 293.66, ()),
    ("D#4", 311.13, ("Eb4",)),
    ("E4", 329.63, ()),
    ("F4", 349.23, ()),
    ("F#4", 369.99, ()),
    ("G4", 392.00, ()),
    ("G#4", 415.30, ("Ab4",)),
)


def _build_catalog() -> tuple[tuple[MusicalNote, ...], MappingProxyType]:
    notes = tuple(
        MusicalNote(id=i, name=name, frequency=freq, aliases=aliases)
        for i, (name, freq, aliases) in enumerate(_NOTE_TABLE)
    )
    by_name: dict[str, MusicalNote] = {}
    for note in notes:
        for spelling in note.spellings:
            if spelling in by_name:
                raise ValueError(f"duplicate note spelling in catalog: {spelling}")
            by_name[spelling] = note
    return notes, MappingProxyType(by_name)


_NOTES, _BY_NAME = _build_catalog()

NOTE_COUNT = len(_NOTES)


def all_notes() -> tuple[MusicalNote, ...]:
    """Return every catalog entry in id order."""
    return _NOTES


def lookup(name: str) -> MusicalNote:
    """Find a note by canonical or alternate spelling.

    Args:
        name: Note spelling such as "C#3" or "Eb4".

    Returns:
        The matching MusicalNote.

    Raises:
        UnknownNoteError: If no note is spelled that way.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownNoteError(f"No note found for name: {name!r}") from None


def note_id(name: str) -> int:
    """Return the id of the note spelled ``name``."""
    return lookup(name).id


def by_id(value: int) -> MusicalNote:
    """Find a note by id.

    Raises:
        UnknownNoteError: If the id is outside the catalog.
    """
    if not 0 <= value < NOTE_COUNT:
        raise UnknownNoteError(f"No note found for id: {value}")
    return _NOTES[value]
