"""Stage 2a: Byte sequence validity filtering."""

from __future__ import annotations

import codecs

from depot_gbk.profiles import CharsetProfile


def decode_strict(
    data: bytes, profile: CharsetProfile, *, truncated: bool = False
) -> str:
    """Decode *data* with the profile's codec, raising on any invalid byte.

    When *truncated* is set, an incomplete multi-byte sequence at the very
    end is dropped instead of treated as an error.

    :raises UnicodeDecodeError: If *data* is not valid in the profile's codec.
    """
    if not truncated:
        return data.decode(profile.python_codec, errors="strict")
    decoder = codecs.getincrementaldecoder(profile.python_codec)(errors="strict")
    return decoder.decode(data, final=False)


def filter_by_validity(
    data: bytes,
    candidates: tuple[CharsetProfile, ...],
    *,
    truncated: bool = False,
) -> dict[str, str]:
    """Decode *data* under every candidate and keep the ones that succeed.

    :param data: The raw byte data to test.
    :param candidates: Profiles to validate.
    :param truncated: Whether *data* was cut from a longer buffer.
    :returns: A dict mapping surviving profile names to their decoded text,
        in candidate order.
    """
    valid: dict[str, str] = {}
    for profile in candidates:
        try:
            valid[profile.name] = decode_strict(data, profile, truncated=truncated)
        except (UnicodeDecodeError, LookupError):
            continue
    return valid
