from typing import Optional, Union


__all__ = [  # pylint: disable=unused-variable
    "DerivationMessage",
    "encode_label",
    "kdfa_message",
    "kdfe_message"
]


UINT32_MAX = 0xFFFFFFFF


def encode_label(label: Union[str, bytes]) -> bytes:
    """
    Args:
        label: The label, either as text or as raw bytes.

    Returns:
        The raw label bytes, without terminator. Text labels are encoded as UTF-8.
    """

    if isinstance(label, str):
        return label.encode("UTF-8")
    return bytes(label)


class DerivationMessage:
    """
    Builder for the message fed into the pseudorandom function for a single output block. Fields are
    concatenated in exactly the order they are appended, without any length prefixes or padding.
    """

    def __init__(self) -> None:
        self.__fields = bytearray()

    def append_uint32(self, value: int) -> "DerivationMessage":
        """
        Args:
            value: The value to append as a 32-bit big-endian unsigned integer.

        Returns:
            This builder.

        Raises:
            OverflowError: if the value does not fit into 32 bits unsigned.
        """

        if not 0 <= value <= UINT32_MAX:
            raise OverflowError(f"Value {value} does not fit into an unsigned 32-bit field.")

        self.__fields += value.to_bytes(4, "big")
        return self

    def append_bytes(self, data: Optional[bytes]) -> "DerivationMessage":
        """
        Args:
            data: The raw bytes to append. ``None`` is treated as an empty byte string.

        Returns:
            This builder.
        """

        if data is not None:
            self.__fields += data
        return self

    def append_label(self, label: Union[str, bytes]) -> "DerivationMessage":
        """
        Append the label bytes followed by a single zero byte. Zero bytes already contained in the label are
        neither escaped nor stripped.

        Args:
            label: The label, either as text or as raw bytes.

        Returns:
            This builder.
        """

        self.__fields += encode_label(label)
        self.__fields += b"\x00"
        return self

    def build(self) -> bytes:
        """
        Returns:
            The concatenation of all fields appended so far.
        """

        return bytes(self.__fields)


def kdfa_message(
    counter: int,
    label: Union[str, bytes],
    context_u: Optional[bytes],
    context_v: Optional[bytes],
    bits: int
) -> bytes:
    """
    Args:
        counter: The block counter, starting at 1.
        label: The label.
        context_u: The first context value.
        context_v: The second context value.
        bits: The total number of bits requested from KDFa.

    Returns:
        ``counter || label || 0x00 || context_u || context_v || bits``, with counter and bits encoded as
        32-bit big-endian unsigned integers.
    """

    return DerivationMessage() \
        .append_uint32(counter) \
        .append_label(label) \
        .append_bytes(context_u) \
        .append_bytes(context_v) \
        .append_uint32(bits) \
        .build()


def kdfe_message(
    counter: int,
    z: bytes,
    label: Union[str, bytes],
    party_u_info: Optional[bytes],
    party_v_info: Optional[bytes]
) -> bytes:
    """
    Args:
        counter: The block counter, starting at 1.
        z: The shared secret.
        label: The label.
        party_u_info: The first party information value.
        party_v_info: The second party information value.

    Returns:
        ``counter || z || label || 0x00 || party_u_info || party_v_info``, with the counter encoded as a
        32-bit big-endian unsigned integer. The requested bit length is not part of the message.
    """

    return DerivationMessage() \
        .append_uint32(counter) \
        .append_bytes(z) \
        .append_label(label) \
        .append_bytes(party_u_info) \
        .append_bytes(party_v_info) \
        .build()
