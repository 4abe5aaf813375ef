"""Value types shared by the parser, the interpreters, and the record.

Two closed unions describe every value that can appear in a record:

**GrammarValue**: what the key/value grammar alone can produce.  An
    unquoted token that is a base-10 unsigned integer becomes ``int``;
    a quoted value whose content is itself a ``key=value`` list becomes
    a nested ``dict``; everything else stays ``str``.

**FieldValue**: what an interpreted field can hold.  It extends the
    grammar values with ``None`` (null sentinels and unset ids),
    ``bool`` (``success=yes``), and ``list[str]`` (capabilities,
    permissions, PAM grantors).

Both unions are plain Python values, so a record converts to JSON
without a custom encoder.  Signed and unsigned integers are both
``int``: Python has one arbitrary-precision integer type.
"""

from typing_extensions import TypeAliasType

GrammarValue = TypeAliasType("GrammarValue", "int | str | dict[str, GrammarValue]")

FieldValue = TypeAliasType(
    "FieldValue", "None | bool | int | str | list[str] | dict[str, FieldValue]"
)
