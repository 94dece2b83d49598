import scancursor.version
from _scancursor.combinators import bind, one_of, optional, repeated, rewind
from _scancursor.common import scan_one_of, scan_run, scan_word, skip_run
from _scancursor.cursor import Cursor
from _scancursor.errors import ScanError
from _scancursor.token import EOS, EndOfStream, Token

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = scancursor.version.version

__all__ = [
    "Cursor",
    "EOS",
    "EndOfStream",
    "ScanError",
    "Token",
    "bind",
    "one_of",
    "optional",
    "repeated",
    "rewind",
    "scan_one_of",
    "scan_run",
    "scan_word",
    "skip_run",
]
