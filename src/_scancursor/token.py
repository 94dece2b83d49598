from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
D = TypeVar("D")


@unique
class EndOfStream(Enum):
    """
    Returned by Cursor.next and Cursor.look_ahead once the text is exhausted.
    An enum member never compares equal to a str, so it cannot be mistaken
    for a character of the text.
    """

    EOS = auto()

    def __repr__(self):
        return "EOS"


EOS = EndOfStream.EOS


@dataclass(frozen=True)
class Token(Generic[T, D]):
    """
    A token emitted by a Cursor.

    For tokens produced by Cursor.emit, value is text[start_pos:end_pos].
    For tokens produced by Cursor.emit_error, value is the error message and
    start_pos, end_pos are the cursor positions at the time of the error.
    """

    value: str
    type: T
    start_pos: int
    end_pos: int
    data: Optional[D] = None
