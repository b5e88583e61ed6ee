"""Declaration and Rule: the mutable declaration tree the transforms edit."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator


@dataclass(eq=False)
class Declaration:
    """A single ``prop: value [!important]`` entry of a rule.

    Declarations compare by identity: two entries with the same text are still
    distinct positions in their rule.
    """

    prop: str
    value: str
    important: bool = False

    def clone(self, **overrides: object) -> Declaration:
        """Return a copy with *overrides* applied (``prop``, ``value``, ...)."""
        return replace(self, **overrides)  # type: ignore[arg-type]

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{suffix}"


class Rule:
    """An ordered, mutable list of declarations with splice primitives.

    A declaration's position is its current index; positions are recomputed on
    every edit, so callers hold on to declarations, never to indexes.
    """

    def __init__(
        self, declarations: Iterable[Declaration] = (), selector: str = ""
    ) -> None:
        self.selector = selector
        self._declarations: list[Declaration] = list(declarations)

    # --- sequence protocol --------------------------------------------------

    def __iter__(self) -> Iterator[Declaration]:
        return iter(list(self._declarations))

    def __len__(self) -> int:
        return len(self._declarations)

    def __getitem__(self, index: int) -> Declaration:
        return self._declarations[index]

    def __contains__(self, decl: object) -> bool:
        return any(d is decl for d in self._declarations)

    def __repr__(self) -> str:
        body = "; ".join(str(d) for d in self._declarations)
        return f"Rule({self.selector!r}, {{{body}}})"

    @property
    def declarations(self) -> list[Declaration]:
        """Snapshot of the current declarations, in order."""
        return list(self._declarations)

    # --- positions ----------------------------------------------------------

    def index(self, decl: Declaration) -> int:
        for i, d in enumerate(self._declarations):
            if d is decl:
                return i
        raise ValueError(f"{decl} is not part of this rule")

    def next(self, decl: Declaration) -> Declaration | None:
        """The declaration directly after *decl*, if any."""
        i = self.index(decl) + 1
        if i < len(self._declarations):
            return self._declarations[i]
        return None

    # --- edits --------------------------------------------------------------

    def append(self, *decls: Declaration) -> None:
        self._declarations.extend(decls)

    def insert_before(self, ref: Declaration, *decls: Declaration) -> None:
        i = self.index(ref)
        self._declarations[i:i] = decls

    def insert_after(self, ref: Declaration, *decls: Declaration) -> None:
        i = self.index(ref) + 1
        self._declarations[i:i] = decls

    def remove(self, decl: Declaration) -> None:
        del self._declarations[self.index(decl)]

    def replace(self, decl: Declaration, decls: Iterable[Declaration]) -> None:
        """Splice *decls* into the position held by *decl*."""
        i = self.index(decl)
        self._declarations[i : i + 1] = list(decls)
