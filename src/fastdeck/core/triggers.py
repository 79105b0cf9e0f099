"""
Trigger tokens that switch the scanner from scalar records to a table

A trigger is matched against either the value or the label of a tokenized
line. Values are compared with their quotes, because the tokenizer reports
string values (such as table header words) in double quotes.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..utils.logging import FastDeckLogger

KINDS = ("numeric", "mixed", "file_list")
MATCH_ON = ("value", "label")


@dataclass(frozen=True)
class TableTrigger:
    """One row of the dispatch table"""
    token: str          # '"HtFract"' for value triggers, 'FoilNm' for label triggers
    match: str          # "value" or "label"
    kind: str           # "numeric", "mixed" or "file_list"
    size: str           # label of the scalar that holds the row count
    target: str         # key in FastDocument.tables / FastDocument.file_lists
    units_line: bool = True

    @property
    def key(self) -> str:
        return self.token.lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableTrigger":
        """Build a trigger from a YAML mapping

        Raises:
            ValueError: If a key is missing or holds an unknown choice
        """
        missing = [k for k in ("token", "match", "kind", "size", "target") if not data.get(k)]
        if missing:
            raise ValueError(f"Trigger {data!r} is missing {', '.join(missing)}")

        match = str(data["match"]).lower()
        kind = str(data["kind"]).lower()
        if match not in MATCH_ON:
            raise ValueError(f"Trigger match must be one of {MATCH_ON}, got {match!r}")
        if kind not in KINDS:
            raise ValueError(f"Trigger kind must be one of {KINDS}, got {kind!r}")

        return cls(
            token=str(data["token"]),
            match=match,
            kind=kind,
            size=str(data["size"]),
            target=str(data["target"]),
            units_line=bool(data.get("units_line", True)),
        )


DEFAULT_TRIGGERS = [
    TableTrigger('"HtFract"', "value", "numeric", "NTwInpSt", "TowProp"),
    TableTrigger('"BlFract"', "value", "numeric", "NBlInpSt", "BldProp"),
    TableTrigger('"GenSpd_TLU"', "value", "numeric", "DLL_NumTrq", "DLLProp"),
    TableTrigger("FoilNm", "label", "file_list", "NumFoil", "FoilNm"),
    TableTrigger('"RNodes"', "value", "mixed", "BldNodes", "BldNodes", units_line=False),
]


class TriggerTable:
    """Triggers keyed by lower-cased token, one lookup per match side"""

    def __init__(self, triggers: Iterable[TableTrigger] = DEFAULT_TRIGGERS):
        self._by_value: Dict[str, TableTrigger] = {}
        self._by_label: Dict[str, TableTrigger] = {}
        for trigger in triggers:
            self.add(trigger)

    def add(self, trigger: TableTrigger) -> None:
        side = self._by_value if trigger.match == "value" else self._by_label
        side[trigger.key] = trigger

    def match(self, value: str, label: str) -> Optional[TableTrigger]:
        """Trigger for a record, checking its value before its label"""
        trigger = self._by_value.get(value.lower())
        if trigger is None:
            trigger = self._by_label.get(label.lower())
        return trigger

    def __iter__(self):
        yield from self._by_value.values()
        yield from self._by_label.values()

    def __len__(self) -> int:
        return len(self._by_value) + len(self._by_label)


def triggers_from_data(data: Dict[str, Any]) -> List[TableTrigger]:
    """Read the ``triggers`` list of a table-triggers.yaml document

    An empty or malformed document gives the built-in defaults.
    """
    entries = (data or {}).get("triggers")
    if not entries:
        return list(DEFAULT_TRIGGERS)

    try:
        return [TableTrigger.from_dict(entry) for entry in entries]
    except (TypeError, ValueError, AttributeError) as e:
        FastDeckLogger.warning(f"Ignoring table-triggers data: {e}")
        return list(DEFAULT_TRIGGERS)
