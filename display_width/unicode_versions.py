"""Unicode versions available to build a width index from."""
import os
import unicodedata
import warnings
from functools import lru_cache


def list_versions() -> tuple[str, ...]:
    """Return Unicode versions supported by this interpreter.

    Python's :mod:`unicodedata` carries the database of its own release as
    well as a frozen ``3.2.0`` snapshot (``unicodedata.ucd_3_2_0``).

    Returns:
    -------
        Supported Unicode version strings, ascending.

    """
    versions = {'3.2.0', unicodedata.unidata_version}
    return tuple(sorted(versions, key=_wcversion_value))


@lru_cache(maxsize=128)
def _wcversion_value(ver_string: str) -> tuple[int, ...]:
    """Integer-mapped value of given dotted version string.

    Missing trailing components count as zero, so ``'8.0'`` and ``'8.0.0'``
    compare equal.

    Args:
    ----
        ver_string: Unicode version string, of form ``n.n.n``.

    Returns:
    -------
        Tuple of integers, ``tuple(int, int, int)``.

    """
    value = tuple(map(int, ver_string.split(".")))
    return value + (0,) * (3 - len(value))


@lru_cache(maxsize=8)
def _wcmatch_version(given_version: str) -> str:
    """Return nearest matching supported Unicode version level.

    If an exact match is not determined, the nearest lowest version level is
    returned after a warning is emitted.  For example, given supported levels
    ``3.2.0`` and ``15.0.0``, and a version string of ``9.0.0``, then
    ``3.2.0`` is selected and returned.

    Args:
    ----
        given_version: Given version for compare, may be ``auto``
            (default), to select Unicode Version from Environment Variable,
            ``UNICODE_VERSION``. If the environment variable is not set, then the
            latest is used.

    Returns:
    -------
        A version string member of :func:`list_versions`.

    """
    if given_version == "auto":
        given_version = os.environ.get("UNICODE_VERSION", "latest")

    supported_versions = list_versions()

    if given_version == "latest":
        return supported_versions[-1]

    try:
        given_value = _wcversion_value(given_version)
    except ValueError:
        warnings.warn(f"Invalid Unicode version {given_version}, using latest")
        return supported_versions[-1]

    for version in reversed(supported_versions):
        if _wcversion_value(version) <= given_value:
            if _wcversion_value(version) < given_value:
                warnings.warn(
                    f"Unicode version {given_version} not found, using {version}"
                )
            return version

    warnings.warn(
        f"Unicode version {given_version} not found, using {supported_versions[0]}"
    )
    return supported_versions[0]
