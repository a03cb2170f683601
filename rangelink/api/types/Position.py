from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """1-indexed location in a file.

    ``character=None`` means the whole line, not column zero.
    """

    line: int
    character: int | None = None

    def to_dict(self) -> dict[str, int | None]:
        return {"line": self.line, "character": self.character}
