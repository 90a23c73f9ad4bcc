"""
SQL Helpers
"""
from enum import Enum
from typing import Any, List, Mapping, NamedTuple

from app.core.errors import BadRequestError


class SetFragment(NamedTuple):
    """SET clause of an UPDATE plus the values bound to it, in placeholder order"""
    set_clause: str
    values: List[Any]


def _key_name(key: Any) -> str:
    return key.value if isinstance(key, Enum) else key


def build_set_fragment(
    fields_to_update: Mapping[Any, Any],
    column_aliases: Mapping[Any, str],
) -> SetFragment:
    """
    Build the SET part of a partial UPDATE.

    Each key of `fields_to_update` becomes `"<column>"=$<n>`, in insertion
    order, where the column is `column_aliases[key]` when the logical name
    differs from the stored one and the key itself otherwise. Placeholders run
    $1..$n, so a caller binding more values afterwards (e.g. `WHERE id = ...`)
    continues at `len(values) + 1`.

        build_set_fragment({"title": "J1", "companyHandle": "c1"},
                           {"companyHandle": "company_handle"})
        => SetFragment('"title"=$1, "company_handle"=$2', ["J1", "c1"])

    Raises BadRequestError when there is nothing to update.
    """
    if not fields_to_update:
        raise BadRequestError("No data")

    aliases = {_key_name(k): v for k, v in column_aliases.items()}

    columns = []
    values = []
    for key, value in fields_to_update.items():
        name = _key_name(key)
        values.append(value)
        columns.append(f'"{aliases.get(name, name)}"=${len(values)}')

    return SetFragment(", ".join(columns), values)
