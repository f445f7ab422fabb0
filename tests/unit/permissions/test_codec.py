"""Unit tests for the permission bitmask codec.

These tests verify:
- Decoding bitmasks into names in bit order
- Encoding names into bitmasks
- Membership checks
- Rejection of malformed values and unknown names
"""

from itertools import combinations

import pytest

from railcat.core.errors import InvalidInputError, UnknownPermissionError
from railcat.core.permissions import (
    ADD_CONTENT,
    DEFAULT_REGISTRY,
    DELETE_CONTENT,
    MANAGE_ROLES,
    VERIFY_CONTENT,
    PermissionCodec,
    get_permission_codec,
)


pytestmark = pytest.mark.unit


ALL_NAMES = (ADD_CONTENT, VERIFY_CONTENT, DELETE_CONTENT, MANAGE_ROLES)


def _all_subsets() -> list[tuple[str, ...]]:
    return [
        subset
        for size in range(len(ALL_NAMES) + 1)
        for subset in combinations(ALL_NAMES, size)
    ]


@pytest.fixture
def codec() -> PermissionCodec:
    return PermissionCodec()


class TestDecode:
    """Tests for PermissionCodec.decode."""

    def test_zero_is_empty_set(self, codec: PermissionCodec) -> None:
        """Verify 0 decodes to no permissions."""
        assert codec.decode(0) == ()

    def test_decode_add_and_delete(self, codec: PermissionCodec) -> None:
        """Verify 5 grants ADD_CONTENT and DELETE_CONTENT."""
        assert codec.decode(5) == (ADD_CONTENT, DELETE_CONTENT)

    def test_decode_all_permissions(self, codec: PermissionCodec) -> None:
        """Verify 15 grants everything, in bit order."""
        assert codec.decode(15) == ALL_NAMES

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, (ADD_CONTENT,)),
            (2, (VERIFY_CONTENT,)),
            (4, (DELETE_CONTENT,)),
            (8, (MANAGE_ROLES,)),
        ],
    )
    def test_single_bits(
        self, codec: PermissionCodec, value: int, expected: tuple[str, ...]
    ) -> None:
        """Verify each bit maps to its registered name."""
        assert codec.decode(value) == expected

    def test_unregistered_bits_are_ignored(self, codec: PermissionCodec) -> None:
        """Verify bits with no registered permission do not fail decoding."""
        assert codec.decode(16) == ()
        assert codec.decode(1024 | 1) == (ADD_CONTENT,)

    def test_missing_value_rejected(self, codec: PermissionCodec) -> None:
        """Verify None raises InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            codec.decode(None)

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == "invalid_input"

    def test_negative_value_rejected(self, codec: PermissionCodec) -> None:
        """Verify negative integers raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            codec.decode(-1)

    @pytest.mark.parametrize("value", ["5", 5.0, True, False, [1], {"bits": 1}])
    def test_non_integer_rejected(self, codec: PermissionCodec, value: object) -> None:
        """Verify strings, floats, booleans and containers are not bitmasks."""
        with pytest.raises(InvalidInputError):
            codec.decode(value)


class TestEncode:
    """Tests for PermissionCodec.encode."""

    def test_empty_set_is_zero(self, codec: PermissionCodec) -> None:
        """Verify encoding no names gives 0."""
        assert codec.encode([]) == 0

    def test_verify_and_manage(self, codec: PermissionCodec) -> None:
        """Verify VERIFY_CONTENT and MANAGE_ROLES encode to 10."""
        assert codec.encode({VERIFY_CONTENT, MANAGE_ROLES}) == 10

    def test_order_and_duplicates_do_not_matter(self, codec: PermissionCodec) -> None:
        """Verify encoding treats its input as a set."""
        assert codec.encode([DELETE_CONTENT, ADD_CONTENT, ADD_CONTENT]) == 5

    def test_single_name_string(self, codec: PermissionCodec) -> None:
        """Verify a bare name is encoded as one permission, not its characters."""
        assert codec.encode(MANAGE_ROLES) == 8

    def test_unknown_name_rejected(self, codec: PermissionCodec) -> None:
        """Verify unregistered names raise UnknownPermissionError."""
        with pytest.raises(UnknownPermissionError) as exc_info:
            codec.encode([ADD_CONTENT, "NONEXISTENT"])

        assert exc_info.value.details["permission"] == "NONEXISTENT"
        assert exc_info.value.details["known_permissions"] == list(ALL_NAMES)

    def test_names_are_case_sensitive(self, codec: PermissionCodec) -> None:
        """Verify lowercase names are not registered."""
        with pytest.raises(UnknownPermissionError):
            codec.encode(["add_content"])


class TestRoundTrip:
    """Tests for the relationship between encode and decode."""

    @pytest.mark.parametrize("subset", _all_subsets())
    def test_decode_inverts_encode(
        self, codec: PermissionCodec, subset: tuple[str, ...]
    ) -> None:
        """Verify every subset of the registry survives encoding, in bit order."""
        assert codec.decode(codec.encode(subset)) == subset

    def test_encode_inverts_decode_on_registered_bits(
        self, codec: PermissionCodec
    ) -> None:
        """Verify every value using only registered bits survives decoding."""
        for value in range(16):
            assert codec.encode(codec.decode(value)) == value

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (a, b)
            for a in _all_subsets()
            for b in _all_subsets()
            if not set(a) & set(b)
        ],
    )
    def test_disjoint_union_is_bitwise_or(
        self, codec: PermissionCodec, a: tuple[str, ...], b: tuple[str, ...]
    ) -> None:
        """Verify encoding a union of disjoint sets equals OR of the encodings."""
        assert codec.encode(set(a) | set(b)) == codec.encode(a) | codec.encode(b)


class TestHas:
    """Tests for PermissionCodec.has."""

    def test_granted(self, codec: PermissionCodec) -> None:
        assert codec.has(5, DELETE_CONTENT) is True

    def test_single_grant(self, codec: PermissionCodec) -> None:
        encoded = codec.encode({ADD_CONTENT})

        assert codec.has(encoded, ADD_CONTENT) is True
        assert codec.has(encoded, DELETE_CONTENT) is False

    def test_not_granted(self, codec: PermissionCodec) -> None:
        assert codec.has(5, VERIFY_CONTENT) is False

    def test_empty_set_grants_nothing(self, codec: PermissionCodec) -> None:
        assert not any(codec.has(0, name) for name in ALL_NAMES)

    def test_unknown_name_rejected(self, codec: PermissionCodec) -> None:
        """Verify asking about an unregistered name is an error, not False."""
        with pytest.raises(UnknownPermissionError):
            codec.has(15, "NONEXISTENT")

    def test_malformed_value_rejected(self, codec: PermissionCodec) -> None:
        with pytest.raises(InvalidInputError):
            codec.has("15", ADD_CONTENT)


class TestCustomRegistry:
    """Tests for codecs built on an extended registry."""

    def test_appended_permission_takes_next_bit(self) -> None:
        """Verify a new permission never changes existing encodings."""
        codec = PermissionCodec(DEFAULT_REGISTRY.appended("PUBLISH"))

        assert codec.encode(["PUBLISH"]) == 16
        assert codec.decode(21) == (ADD_CONTENT, DELETE_CONTENT, "PUBLISH")
        assert codec.encode(ALL_NAMES) == 15

    def test_shared_codec_uses_default_registry(self) -> None:
        """Verify the process-wide codec is cached and uses the default layout."""
        assert get_permission_codec() is get_permission_codec()
        assert get_permission_codec().registry == DEFAULT_REGISTRY
