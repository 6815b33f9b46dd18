# domain/model/entry.py

"""Dictionary entry domain models.

The JSON shape of every record uses the camelCase keys of the result
file (``posList``, ``subSenses``), in field order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ── Value Objects ────────────────────────────────────────


@dataclass(frozen=True)
class SubSense:
    """A finer-grained meaning nested under a sense."""
    sense: str = ""
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"sense": self.sense, "examples": list(self.examples)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubSense:
        return cls(sense=data.get("sense", ""), examples=list(data.get("examples", [])))


@dataclass(frozen=True)
class Sense:
    """A distinct meaning of a word within one part of speech."""
    sense: str = ""
    examples: list[str] = field(default_factory=list)
    sub_senses: list[SubSense] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sense": self.sense,
            "examples": list(self.examples),
            "subSenses": [sub.to_dict() for sub in self.sub_senses],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sense:
        return cls(
            sense=data.get("sense", ""),
            examples=list(data.get("examples", [])),
            sub_senses=[SubSense.from_dict(s) for s in data.get("subSenses", [])],
        )


@dataclass(frozen=True)
class PosGroup:
    """Senses grouped under one part-of-speech label."""
    pos: str = ""
    senses: list[Sense] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"pos": self.pos, "senses": [s.to_dict() for s in self.senses]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PosGroup:
        return cls(
            pos=data.get("pos", ""),
            senses=[Sense.from_dict(s) for s in data.get("senses", [])],
        )


@dataclass(frozen=True)
class PhraseSense:
    """One meaning of an idiomatic phrase."""
    sense: str = ""
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"sense": self.sense, "examples": list(self.examples)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PhraseSense:
        return cls(sense=data.get("sense", ""), examples=list(data.get("examples", [])))


@dataclass(frozen=True)
class Phrase:
    """A multi-word idiomatic expression and its senses."""
    phrase: str = ""
    senses: list[PhraseSense] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"phrase": self.phrase, "senses": [s.to_dict() for s in self.senses]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Phrase:
        return cls(
            phrase=data.get("phrase", ""),
            senses=[PhraseSense.from_dict(s) for s in data.get("senses", [])],
        )


# ── Entry Domain Model ───────────────────────────────────


@dataclass(frozen=True)
class Entry:
    """Everything extracted for one input word.

    One Entry is produced per input word, in input order.
    """
    word: str
    pos_list: list[PosGroup] = field(default_factory=list)
    phrases: list[Phrase] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "posList": [group.to_dict() for group in self.pos_list],
            "phrases": [phrase.to_dict() for phrase in self.phrases],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Rebuild an Entry from its JSON shape (inverse of to_dict)."""
        return cls(
            word=data["word"],
            pos_list=[PosGroup.from_dict(g) for g in data.get("posList", [])],
            phrases=[Phrase.from_dict(p) for p in data.get("phrases", [])],
        )
