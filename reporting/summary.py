from __future__ import annotations
from engine.rebalance_engine import Rebalance
from reporting.table import Column, Table

def rebalance_table(result: Rebalance) -> Table:
    return Table([
        Column.from_decimals("Original", result.original),
        Column.from_decimals("Final", result.future),
        Column.from_decimals("Change", result.change),
    ])
