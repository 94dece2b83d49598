from _scancursor.combinators import rewind
from _scancursor.errors import ScanError


def scan_word(word, kind, data=None):
    """
    Scanner combinator for fixed words, ie. when the cursor is at 'let'
    scan_word('let', TokenKind.LET) will emit Token('let', TokenKind.LET, 0,
    3).

    :returns: Scanner for the given word, emitting a token
        of the given kind.
    :param word: Any non-empty word to be matched by the scanner.
    :param kind: The kind of token emitted by the scanner.
    :param data: Payload attached to the emitted token.
    """
    if not word:
        raise ValueError("scan_word requires a non-empty word")

    def word_scanner(cursor):
        start = cursor.current_pos
        for expected in word:
            char = cursor.next()
            if char != expected:
                rewind(cursor, start)
                raise ScanError(f"Expected {word!r} at {start}, got {char!r}")
        cursor.emit(kind, data)

    return word_scanner


def scan_run(predicate, kind, data=None):
    """
    Scanner combinator for runs, ie. scan_run(str.isdigit, TokenKind.NUMBER)
    emits Token('123', TokenKind.NUMBER, 0, 3) for '123+4'.

    :param predicate: Function from a single character to bool.
    :param kind: The kind of token emitted by the scanner.
    :param data: Payload attached to the emitted token.
    """

    def run_scanner(cursor):
        if cursor.accept_run(predicate) < 1:
            raise ScanError(
                f"Expected {kind} at {cursor.current_pos}, "
                f"got {cursor.look_ahead()!r}"
            )
        cursor.emit(kind, data)

    return run_scanner


def skip_run(predicate):
    """
    Scanner combinator which consumes a run of characters satisfying
    predicate without emitting a token, eg. for whitespace.

    Note: pending text read before the run is dropped as well.
    """

    def skip_scanner(cursor):
        if cursor.accept_run(predicate) < 1:
            raise ScanError(
                f"Expected run to skip at {cursor.current_pos}, "
                f"got {cursor.look_ahead()!r}"
            )
        cursor.ignore()

    return skip_scanner


def scan_one_of(chars, kind, data=None):
    """
    Scanner combinator for a single character out of chars, ie.
    scan_one_of('+-', TokenKind.SIGN) emits Token('-', TokenKind.SIGN, 0, 1)
    for '-1'.
    """

    def one_char_scanner(cursor):
        char = cursor.next()
        if not isinstance(char, str) or char not in chars:
            cursor.backup()
            raise ScanError(
                f"Expected one of {chars!r} at {cursor.current_pos}, got {char!r}"
            )
        cursor.emit(kind, data)

    return one_char_scanner
