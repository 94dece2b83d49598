from importlib.metadata import PackageNotFoundError, version

try:
    version = version("ScanCursor")
except PackageNotFoundError:
    version = "0.0.0"
