"""Basic usage example using the convenience API."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from epinetwork import ContactTrace, Contacts, Direction, configure, network_structure
from epinetwork.serializers import save_table_csv, save_trace_json


def main() -> None:
    output_dir = Path("artifacts")
    output_dir.mkdir(exist_ok=True)
    configure(max_workers=1)

    # Movements are stored once; the index gives the depth first visitation order.
    ingoing = Contacts.from_pool(
        2645,
        Direction.INGOING,
        date(2005, 8, 2),
        date(2005, 10, 31),
        source=[1, 609, 5399],
        destination=[2645, 1, 609],
        index=[0, 0, 1, 2],
        distance=[1, 1, 2, 3],
    )
    outgoing = Contacts.from_pool(
        2645,
        Direction.OUTGOING,
        date(2005, 8, 2),
        date(2005, 10, 31),
        source=[2645, 2645, 4],
        destination=[4, 11, 2645],
        index=[0, 2, 0, 1],
        distance=[1, 2, 1, 1],
    )
    contact_trace = ContactTrace(root=2645, ingoing=ingoing, outgoing=outgoing)

    table = network_structure(contact_trace)
    print(table.to_dataframe().to_string(index=False))

    trace_path = save_trace_json(contact_trace, output_dir / "2645.json")
    table_path = save_table_csv(table, output_dir / "2645_network.csv")
    print(f"Contact trace saved to: {trace_path}")
    print(f"Network structure saved to: {table_path}")


if __name__ == "__main__":
    main()
