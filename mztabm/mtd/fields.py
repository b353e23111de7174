# mztabm/mtd/fields.py
"""
Field builders for the mzTab-M metadata (MTD) section.

All MTD entities (samples, MS runs, assays, CVs, ...) are addressed by a
1-based index, e.g. ``sample[2]``. Their attributes are appended to that name
(``sample[2]-description``) and attributes that can take several values per
entity carry a second index (``sample[2]-species[1]``). The builders in this
module create these names from plain value vectors.
"""

import logging
from typing import Any, List, Sequence, Tuple

import pandas as pd

from ..core.types import RankedRow, rows_to_frame
from ..core.values import as_vector
from ..errors import LengthMismatchError

logger = logging.getLogger(__name__)


def _field_name(prefix: str, index: int, name: str = "") -> str:
    if name:
        return f"{prefix}[{index}]-{name}"
    return f"{prefix}[{index}]"


def mtd_fields(*values: Any, field_prefix: str = "", **fields: Any) -> pd.DataFrame:
    """
    Prepare and format information for the mzTab-M metadata section.

    Combines the provided value vectors into the fields of one MTD element,
    e.g. the ``cv`` or ``instrument`` fields. The element index is the
    position within the vectors, named vectors become attributes of the
    element.

    Args:
        *values: optional single (unnamed) vector with the values of the
            element itself (e.g. the software names for ``"software"``).
        field_prefix: name of the element, e.g. ``"cv"``.
        **fields: named vectors with attribute values. The name is appended
            to the element name (``label`` gives ``cv[1]-label``). Names that
            are not valid Python identifiers, such as ``analyzer[1]``, can be
            passed with ``**{"analyzer[1]": ...}``.

    Returns:
        Two-column DataFrame (``field``, ``value``), ordered by element
        index and, within an element, by the order of the arguments.

    Raises:
        LengthMismatchError: if the vectors have different lengths. Vectors
            of length 1 are recycled to the length of the others.
        TypeError: if more than one unnamed vector is provided.

    Examples:
        >>> mtd_fields(label=["MS", "PRIDE"], version=["4.1", "16"],
        ...            field_prefix="cv")
        >>> mtd_fields("[MS, MS:1002879, Progenesis QI, 3.0]",
        ...            field_prefix="software")
        >>> mtd_fields(name="[MS, MS:1000449, LTQ Orbitrap,]",
        ...            **{"analyzer[1]": "[MS, MS:1000291, linear ion trap,]"},
        ...            field_prefix="instrument")
    """
    if len(values) > 1:
        raise TypeError(
            f"{field_prefix}: only a single unnamed vector of values can be "
            f"provided, got {len(values)}"
        )
    columns = [("", as_vector(v)) for v in values]
    columns += [(name, as_vector(v)) for name, v in fields.items()]
    return rows_to_frame(field_block(columns, field_prefix))


def field_block(
    columns: Sequence[Tuple[str, List[str]]], prefix: str
) -> List[RankedRow]:
    """
    Build the rows for an element with several attributes.

    Args:
        columns: (name, values) per attribute, an empty name being the
            element itself.
        prefix: name of the element.

    Returns:
        Rows ordered by element index, then by attribute.
    """
    if not columns:
        return []
    length = max(len(vals) for _, vals in columns)
    expanded = []
    for name, vals in columns:
        if len(vals) == 1:
            vals = vals * length
        elif len(vals) != length:
            raise LengthMismatchError(
                f"{prefix}: number of provided elements must match",
                parameter=name or prefix,
            )
        expanded.append((name, vals))
    return [
        RankedRow(_field_name(prefix, i, name), vals[i - 1], i)
        for i in range(1, length + 1)
        for name, vals in expanded
    ]


def indexed_fields(prefix: str, values: Sequence[str], name: str = "") -> List[RankedRow]:
    """Rows ``<prefix>[i]-<name>`` for one attribute with one value per entity."""
    return [
        RankedRow(_field_name(prefix, i, name), value, i)
        for i, value in enumerate(values, start=1)
    ]


def multi_fields(
    slots: Sequence[Sequence[str]], prefix: str, suffix: str
) -> List[RankedRow]:
    """
    Rows ``<prefix>[i]-<suffix>[j]`` for an attribute with several values.

    Each element of ``slots`` holds the values of one entity. Entities
    without values contribute no rows.

    Examples:
        >>> multi_fields([["a", "b"], [], ["c"]], "sample", "species")
        [RankedRow(field='sample[1]-species[1]', value='a', rank=1),
         RankedRow(field='sample[1]-species[2]', value='b', rank=1),
         RankedRow(field='sample[3]-species[1]', value='c', rank=3)]
    """
    return [
        RankedRow(f"{prefix}[{i}]-{suffix}[{j}]", value, i)
        for i, slot in enumerate(slots, start=1)
        for j, value in enumerate(slot, start=1)
    ]


def custom_fields(
    *values: Any,
    prefix: str = "sample",
    suffix: str = "custom",
    expected_length: int = 0,
) -> List[RankedRow]:
    """
    Rows ``<prefix>[i]-<suffix>[k]`` for custom information.

    Each vector in ``values`` is one custom field (``k`` being its position)
    and has to provide exactly one value per entity. Different from
    ``multi_fields()`` the number of values is thus fixed.

    Raises:
        LengthMismatchError: if the length of a vector is not
            ``expected_length``.
    """
    rows = []
    for k, value in enumerate(values, start=1):
        vals = as_vector(value)
        if len(vals) != expected_length:
            raise LengthMismatchError(
                "If optional custom information is provided the length has to "
                f"match the length of '{prefix}'",
                parameter=f"{suffix}[{k}]",
            )
        rows.extend(indexed_fields(prefix, vals, f"{suffix}[{k}]"))
    if rows:
        logger.debug(f"Formatted {len(values)} {suffix} field(s) for '{prefix}'")
    return rows
