"""
lz-string compression as used by the Babel and CodeSandbox REPLs.

Both sites decode ``LZString.decompressFromBase64`` after undoing the
URL-safe substitutions, see
https://github.com/babel/website/blob/master/js/repl/UriUtils.js
"""

from lzstring import LZString

_lz = LZString()


def _to_utf16_units(string: str) -> str:
    """One character per UTF-16 code unit; astral characters become surrogate pairs."""
    data = string.encode("utf-16-le", "surrogatepass")
    return "".join(chr(int.from_bytes(data[i:i + 2], "little")) for i in range(0, len(data), 2))


def _from_utf16_units(string: str) -> str:
    return string.encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def compress(string: str) -> str:
    """Compress ``string`` to URL-safe lz-string base64 without padding."""
    # lz-string works on UTF-16 code units, as JavaScript strings do
    return (
        _lz.compressToBase64(_to_utf16_units(string))
        .replace("+", "-")
        .replace("/", "_")
        .rstrip("=")
    )


def decompress(string: str) -> str:
    """Reverse :func:`compress`."""
    string = string.replace("-", "+").replace("_", "/")
    string += "=" * (-len(string) % 4)
    return _from_utf16_units(_lz.decompressFromBase64(string))
