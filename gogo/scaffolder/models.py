"""Value types shared by the scaffolding generators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedFile:
    """One entry of a generation plan.

    ``path`` is POSIX-style and relative to the project root.  An entry with
    ``content=None`` is a directory to create rather than a file to write.
    """

    path: str
    content: str | None = None
    executable: bool = False

    @property
    def is_dir(self) -> bool:
        return self.content is None
