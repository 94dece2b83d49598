class ScanError(Exception):
    """
    A scanner will throw a ScanError if the text at the cursor position
    does not match what it scans for (however, it could be that some other
    scanner matches there). Before raising, the scanner rewinds the cursor
    to the position where it started.
    """

    pass
