"""Shared console rendering for dosdt commands."""

from typing import Any, Dict

from rich.table import Table

from ..models import DateTimeFields, DosDateTime


def packed_values(pair: DosDateTime) -> Dict[str, Any]:
    """Packed forms of a DOS date/time, keyed like schemas.PackedModel."""
    return {
        "dos_date": f"0x{pair.date:04x}",
        "dos_time": f"0x{pair.time:04x}",
        "dos_datetime": f"0x{pair.value:08x}",
        "value": pair.value,
        "zip_bytes": pair.to_zip_bytes().hex(),
    }


def packed_table(title: str, fields: DateTimeFields, pair: DosDateTime) -> Table:
    """Build the two-column table printed by encode and decode."""
    values = packed_values(pair)

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", width=14)
    table.add_column("Value", style="magenta")

    table.add_row("Time", fields.format())
    table.add_row("DOS Date", values["dos_date"])
    table.add_row("DOS Time", values["dos_time"])
    table.add_row("DOS DateTime", values["dos_datetime"])
    table.add_row("ZIP bytes", " ".join(f"{b:02x}" for b in pair.to_zip_bytes()))
    return table
