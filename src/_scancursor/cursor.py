from typing import Callable, Generic, List, Optional, TypeVar

from _scancursor.token import EOS, Token

T = TypeVar("T")
D = TypeVar("D")


class Cursor(Generic[T, D]):
    """
    A reading cursor over a fixed text which collects the tokens emitted
    by the caller.

    The cursor keeps two positions: the reading position (current_pos) and
    the position from which the next token will be extracted (start_pos).
    Characters between the two are pending until they are either emitted
    as a token or ignored.

    >>> cursor = Cursor("ab+")
    >>> cursor.accept_run(str.isalpha)
    2
    >>> cursor.emit("word")
    Token(value='ab', type='word', start_pos=0, end_pos=2, data=None)
    >>> cursor.next()
    '+'
    >>> cursor.next()
    EOS

    The cursor does not check the bracket and parenthesis depths it keeps,
    rejecting unbalanced input is left to the caller.
    """

    def __init__(self, text: str):
        """
        :param text: The text to scan, fixed for the lifetime of the cursor.
        """
        self._text = text
        self._pos = 0
        self._start = 0
        self._bracket_depth = 0
        self._paren_depth = 0
        self._tokens: List[Token[T, D]] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def current_pos(self) -> int:
        """
        The current reading position, can be past the end of text.
        """
        return self._pos

    @property
    def start_pos(self) -> int:
        """
        The position from which the next emitted token starts.
        """
        return self._start

    @property
    def bracket_depth(self) -> int:
        return self._bracket_depth

    @property
    def paren_depth(self) -> int:
        return self._paren_depth

    @property
    def emitted_tokens(self) -> List[Token[T, D]]:
        """
        :returns: A copy of the tokens emitted so far, in emission order.
        """
        return list(self._tokens)

    def increase_bracket_depth(self):
        self._bracket_depth += 1

    def decrease_bracket_depth(self):
        self._bracket_depth -= 1

    def increase_paren_depth(self):
        self._paren_depth += 1

    def decrease_paren_depth(self):
        self._paren_depth -= 1

    def next(self):
        """
        Advance the reading position by one.

        :returns: The character at the reading position before advancing,
            or EOS if that position is at or past the end of text.
        """
        current = self._pos
        # The position is incremented even past the end of text so that
        # a following backup() undoes exactly this call (see accept_run).
        self._pos += 1
        if current >= len(self._text):
            return EOS
        return self._text[current]

    def backup(self):
        """
        Move the reading position back by one, never below 0.
        """
        if self._pos > 0:
            self._pos -= 1

    def look_ahead(self):
        """
        :returns: What next() would return, without moving the cursor.
        """
        char = self.next()
        self.backup()
        return char

    def at_end(self) -> bool:
        """
        :returns: True when the reading position is at or past the end of text.
        """
        return self._pos >= len(self._text)

    def ignore(self):
        """
        Drop the pending text, ie. the characters read since the last
        emitted token.
        """
        self._start = self._pos

    def pending(self) -> str:
        """
        :returns: The text the next call to emit() would produce.
        """
        return self._text[self._start : self._pos]

    def emit(self, type: T, data: Optional[D] = None) -> Token[T, D]:
        """
        Emit the pending text as a token and start a new one at the
        current reading position.

        :param type: The type of the emitted token.
        :param data: Optional payload attached to the token as is.
        :returns: The emitted token.
        """
        token = Token(self.pending(), type, self._start, self._pos, data)
        self._tokens.append(token)
        self._start = self._pos
        return token

    def emit_error(self, type: T, message: str) -> Token[T, D]:
        """
        Emit an error token whose value is message. Unlike emit(), the
        pending text is kept so scanning can continue from the same
        position.

        :param type: The (error) type of the emitted token.
        :param message: Description of the error, used as the token value.
        :returns: The emitted token.
        """
        token = Token(message, type, self._start, self._pos)
        self._tokens.append(token)
        return token

    def accept_run(self, predicate: Callable[[str], bool]) -> int:
        """
        Advance over the longest run of characters satisfying predicate.
        The predicate is never called with EOS.

        :param predicate: Function from a single character to bool.
        :returns: The number of characters accepted.
        """
        before = self._pos
        char = self.next()
        while char is not EOS and predicate(char):
            char = self.next()
        self.backup()
        return self._pos - before

    def look_behind(self) -> Optional[Token[T, D]]:
        """
        :returns: The last emitted token, or None if nothing has been
            emitted yet.
        """
        if not self._tokens:
            return None
        return self._tokens[-1]

    def look_behind_for_types(self, *types: T) -> Optional[Token[T, D]]:
        """
        :param types: The token types to look for.
        :returns: The most recently emitted token with one of the
            given types, or None.
        """
        for token in reversed(self._tokens):
            if token.type in types:
                return token
        return None

    def __repr__(self):
        return (
            f"Cursor(start_pos={self._start}, current_pos={self._pos}, "
            f"tokens={len(self._tokens)})"
        )
