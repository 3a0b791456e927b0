"""Debug-symbol base types, structured exception names and OS version strings."""

from __future__ import annotations

from enum import IntEnum


class BasicType(IntEnum):
    """Base types of debug symbols, as the symbol handler reports them."""

    NO_TYPE = 0
    VOID = 1
    CHAR = 2
    WCHAR = 3
    INT = 6
    UINT = 7
    FLOAT = 8
    BCD = 9
    BOOL = 10
    LONG = 13
    ULONG = 14
    CURRENCY = 25
    DATE = 26
    VARIANT = 27
    COMPLEX = 28
    BIT = 29
    BSTR = 30
    HRESULT = 31


_BASE_TYPE_NAMES = (
    " <user defined> ",
    " void ",
    " char* ",
    " wchar_t* ",
    " signed char ",
    " unsigned char ",
    " int ",
    " unsigned int ",
    " float ",
    " <BCD> ",
    " bool ",
    " short ",
    " unsigned short ",
    " long ",
    " unsigned long ",
    " __int8 ",
    " __int16 ",
    " __int32 ",
    " __int64 ",
    " __int128 ",
    " unsigned __int8 ",
    " unsigned __int16 ",
    " unsigned __int32 ",
    " unsigned __int64 ",
    " unsigned __int128 ",
    " <currency> ",
    " <date> ",
    " VARIANT ",
    " <complex> ",
    " <bit> ",
    " BSTR ",
    " HRESULT ",
)

_EXCEPTION_NAMES = {
    0xC0000005: "ACCESS_VIOLATION",
    0x80000002: "DATATYPE_MISALIGNMENT",
    0x80000003: "BREAKPOINT",
    0x80000004: "SINGLE_STEP",
    0xC000008C: "ARRAY_BOUNDS_EXCEEDED",
    0xC000008D: "FLT_DENORMAL_OPERAND",
    0xC000008E: "FLT_DIVIDE_BY_ZERO",
    0xC000008F: "FLT_INEXACT_RESULT",
    0xC0000090: "FLT_INVALID_OPERATION",
    0xC0000091: "FLT_OVERFLOW",
    0xC0000092: "FLT_STACK_CHECK",
    0xC0000093: "FLT_UNDERFLOW",
    0xC0000094: "INT_DIVIDE_BY_ZERO",
    0xC0000095: "INT_OVERFLOW",
    0xC0000096: "PRIV_INSTRUCTION",
    0xC0000006: "IN_PAGE_ERROR",
    0xC000001D: "ILLEGAL_INSTRUCTION",
    0xC0000025: "NONCONTINUABLE_EXCEPTION",
    0xC00000FD: "STACK_OVERFLOW",
    0xC0000026: "INVALID_DISPOSITION",
    0x80000001: "GUARD_PAGE",
    0xC0000008: "INVALID_HANDLE",
}


def base_type_name(index: int) -> str:
    """Return the display name of the base type at ``index`` (0 to 31).

    Raises IndexError for an index outside the table.
    """
    index = int(index)
    if not 0 <= index < len(_BASE_TYPE_NAMES):
        raise IndexError(f"no base type with index {index}")
    return _BASE_TYPE_NAMES[index]


def exception_name(code: int) -> str:
    """Return the name of a known exception code, or an empty string."""
    return _EXCEPTION_NAMES.get(int(code) & 0xFFFFFFFF, "")


def _product_name(major: int, minor: int, workstation: bool) -> str:
    if major == 6:
        if minor == 1:
            return "Windows 7 " if workstation else "Windows Server 2008 R2 "
        if minor == 0:
            return "Windows Vista " if workstation else "Windows Server 2008 "
        return "Windows 8 " if workstation else "Windows Server 2012 "
    if major == 5:
        if minor == 1:
            return "Windows XP "
        if minor == 0:
            return "Windows 2000 "
        return "Windows Server 2003 "
    return "Windows NT or lower "


def windows_version_string(
    major: int,
    minor: int,
    build: int,
    workstation: bool = True,
    service_pack: str = "",
) -> str:
    """Describe an OS version the way a crash report prints it."""
    details = f"(Version {major}.{minor}, Build {build & 0xFFFF})"
    if service_pack:
        details = f"{service_pack} {details}"
    return _product_name(major, minor, workstation) + details