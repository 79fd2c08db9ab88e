from importlib import metadata

try:
    __version__ = metadata.version("morpho-apr-calculator")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from morpho_apr import __version__
