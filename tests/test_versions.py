# std imports
import unicodedata
import warnings

# 3rd party
import pytest

# local
from display_width import list_versions
from display_width.unicode_versions import _wcmatch_version, _wcversion_value


@pytest.fixture(autouse=True)
def clear_cache():
    _wcmatch_version.cache_clear()
    yield
    _wcmatch_version.cache_clear()


def test_list_versions():
    """Versions are ascending and include the interpreter's database."""
    versions = list_versions()
    assert versions[0] == '3.2.0'
    assert versions[-1] == unicodedata.unidata_version
    assert list(versions) == sorted(versions, key=_wcversion_value)


def test_version_value():
    assert _wcversion_value('8.0') == (8, 0, 0)
    assert _wcversion_value('13.0.0') == (13, 0, 0)


@pytest.mark.parametrize('given', ['latest', unicodedata.unidata_version])
def test_match_exact(given):
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert _wcmatch_version(given) == unicodedata.unidata_version


def test_match_short_form():
    """A version without its trailing zero matches without warning."""
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert _wcmatch_version('3.2') == '3.2.0'


def test_match_nearest_lower():
    """An unsupported version selects the nearest lower one, with a warning."""
    with pytest.warns(UserWarning, match='not found'):
        assert _wcmatch_version('999.0.0') == unicodedata.unidata_version


def test_match_below_earliest():
    with pytest.warns(UserWarning, match='using 3.2.0'):
        assert _wcmatch_version('1.1.0') == '3.2.0'


def test_match_invalid():
    with pytest.warns(UserWarning, match='Invalid Unicode version'):
        assert _wcmatch_version('x.y') == unicodedata.unidata_version


def test_match_auto_environment(monkeypatch):
    """``auto`` reads the UNICODE_VERSION environment variable."""
    monkeypatch.setenv('UNICODE_VERSION', '3.2.0')
    assert _wcmatch_version('auto') == '3.2.0'


def test_match_auto_latest(monkeypatch):
    monkeypatch.delenv('UNICODE_VERSION', raising=False)
    assert _wcmatch_version('auto') == unicodedata.unidata_version
