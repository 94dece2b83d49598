"""
In this module, a scanner is a function that takes a Cursor, reads from it
and emits tokens. If the text at the cursor does not match, the scanner
winds the cursor back to the position where it started and raises ScanError.

Scanner combinator is any function which returns a scanner.

Emitted tokens cannot be taken back, so a scanner should only emit once it
knows it matches. Combinators can only wind back a failing sequence of
scanners as long as none of them has emitted or ignored text.
"""
import warnings

from _scancursor.errors import ScanError


def rewind(cursor, position):
    """
    Move the reading position of cursor back to the given position using
    single step backups.

    :param cursor: The cursor to rewind.
    :param position: A position between cursor.start_pos and
        cursor.current_pos.
    """
    if position > cursor.current_pos:
        raise ValueError(
            f"Cannot rewind forward from {cursor.current_pos} to {position}"
        )
    if position < cursor.start_pos:
        raise ValueError(
            f"Cannot rewind to {position}, before the start of the "
            f"pending token at {cursor.start_pos}"
        )
    while cursor.current_pos > position:
        cursor.backup()


def _unchanged(cursor, start, last_token):
    return cursor.start_pos == start and cursor.look_behind() is last_token


def bind(*scanners):
    """
    Combinator for scanners.

    :param scanners: List of scanners.
    :returns: A scanner that applies each of the scanners in order. If one
        fails and nothing was emitted or ignored so far, the cursor is
        wound back to where the sequence started.
    """

    def bound_scanner(cursor):
        position = cursor.current_pos
        start = cursor.start_pos
        last_token = cursor.look_behind()
        try:
            for scanner in scanners:
                scanner(cursor)
        except ScanError:
            if (
                _unchanged(cursor, start, last_token)
                and cursor.current_pos >= position
            ):
                rewind(cursor, position)
            raise

    return bound_scanner


def one_of(*scanners):
    """
    Combinator for scanners.

    :param scanners: List of scanners.
    :returns: A scanner that applies the first scanner in scanners that
        succeeds.
    """

    def one_of_scanner(cursor):
        errors = []
        for scanner in scanners:
            try:
                scanner(cursor)
                return
            except ScanError as err:
                errors.append(str(err))

        raise ScanError("Scanning failed, due to one of\n*" + ("\n*".join(errors)))

    return one_of_scanner


def repeated(scanner):
    """
    Combinator for scanner.

    :param scanner: Any scanner.
    :returns: Scanner that applies the scanner zero or more times, until it
        fails. Repetition also stops, with a warning, if the scanner succeeds
        without moving the cursor, whether or not it emitted tokens.
    """

    def repeated_scanner(cursor):
        while True:
            position = cursor.current_pos
            start = cursor.start_pos
            try:
                scanner(cursor)
            except ScanError:
                return
            if cursor.current_pos == position and cursor.start_pos == start:
                warnings.warn(
                    f"Scanner {scanner} matched the empty string at {position}, "
                    "stopping repetition."
                )
                return

    return repeated_scanner


def optional(scanner):
    """
    Combinator for scanner.

    :param scanner: Any scanner.
    :returns: Scanner that applies the scanner once, and succeeds
        whether or not it matched.
    """

    def optional_scanner(cursor):
        try:
            scanner(cursor)
        except ScanError:
            pass

    return optional_scanner
