"""Property-based tests for password conversion."""

from __future__ import annotations

from hypothesis import given, strategies as st

from pdfdoc_password.codec.driver import convert, required_length
from pdfdoc_password.codec.mode import Mode
from pdfdoc_password.codec.tables import COMMON_SPECIALS
from pdfdoc_password.errors import FailureKind

_PASSTHROUGH = [chr(cp) for cp in [*range(0x20, 0x7F), *range(0xA0, 0x100)]]
_LATIN_EXTENDED = [chr(cp) for cp in range(0x100, 0x200)]
_LATIN_EXTENDED_ONLY = [ch for ch in _LATIN_EXTENDED if ord(ch) not in COMMON_SPECIALS]

modes = st.sampled_from([Mode.ENCRYPT, Mode.DECRYPT])


@given(text=st.text(alphabet=_PASSTHROUGH, max_size=40), mode=modes)
def test_passthrough_passwords_unchanged(text: str, mode: Mode) -> None:
    """Printable ASCII and upper Latin-1 come out as their own byte values."""
    data = text.encode("utf-8")
    buf = bytearray(len(text))
    result = convert(data, mode, buf)
    assert result.count == len(text)
    assert bytes(buf) == text.encode("latin-1")


@given(data=st.binary(max_size=48), mode=modes)
def test_query_and_fill_agree_on_arbitrary_bytes(data: bytes, mode: Mode) -> None:
    query = required_length(data, mode)
    fill = convert(data, mode, bytearray(len(data)))
    assert query == fill


@given(text=st.text(max_size=24), mode=modes)
def test_query_and_fill_agree_on_text(text: str, mode: Mode) -> None:
    data = text.encode("utf-8")
    query = required_length(data, mode)
    fill = convert(data, mode, bytearray(len(data)))
    assert query == fill
    # Well-formed 1-3 byte UTF-8 never fails to decode; NUL ends early.
    if query.failure is not None and "\x00" not in text and all(ord(ch) <= 0xFFFF for ch in text):
        assert query.failure is FailureKind.UNMAPPABLE_CHARACTER


@given(text=st.text(max_size=24))
def test_encrypt_success_implies_identical_decrypt(text: str) -> None:
    data = text.encode("utf-8")
    encrypt_buf = bytearray(len(data))
    encrypted = convert(data, Mode.ENCRYPT, encrypt_buf)
    if encrypted.ok:
        decrypt_buf = bytearray(len(data))
        assert convert(data, Mode.DECRYPT, decrypt_buf) == encrypted
        assert decrypt_buf == encrypt_buf


@given(text=st.text(alphabet=_LATIN_EXTENDED, min_size=1, max_size=24))
def test_latin_extended_always_decrypts(text: str) -> None:
    result = convert(text.encode("utf-8"), Mode.DECRYPT)
    assert result.count == len(text)


@given(char=st.sampled_from(_LATIN_EXTENDED_ONLY), prefix=st.text(alphabet=_PASSTHROUGH, max_size=8))
def test_latin_extended_never_encrypts(char: str, prefix: str) -> None:
    result = convert((prefix + char).encode("utf-8"), Mode.ENCRYPT)
    assert result.failure is FailureKind.UNMAPPABLE_CHARACTER
    assert result.code_point == ord(char)
    assert result.offset == len(prefix.encode("utf-8"))


@given(text=st.text(alphabet=_PASSTHROUGH, max_size=8), lead=st.integers(min_value=0xC0, max_value=0xEF), mode=modes)
def test_truncated_trailing_sequence_is_invalid(text: str, lead: int, mode: Mode) -> None:
    data = text.encode("utf-8") + bytes([lead])
    result = convert(data, mode)
    assert result.failure is FailureKind.INVALID_ENCODING
    assert result.offset == len(data) - 1
