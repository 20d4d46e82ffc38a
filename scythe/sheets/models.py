# scythe/sheets/models.py
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LastRow:
    """The last populated row of the ledger sheet, index is 0-based"""

    index: int
    cells: List[str]
