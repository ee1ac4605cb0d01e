from __future__ import annotations

import logging
from dataclasses import dataclass, field

from warnscope import Collector, LogWriter, Message, Scope, WarningLike, ambient, read_all


@dataclass
class Summary:
    details: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"{len(self.details)} row(s) skipped: " + "; ".join(self.details)


def summarize(acc: Summary | None, wrr: WarningLike) -> Summary:
    acc = acc or Summary()
    acc.details.append(wrr.message)
    return acc


def load_rows(rows: list[str]) -> list[int]:
    """Knows nothing about warnings plumbing, only the ambient scope."""
    loaded = []
    for i, row in enumerate(rows):
        if not row.isdigit():
            ambient.warnf("row %d: %r is not a number", i, row)
            continue
        loaded.append(int(row))
    return loaded


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    collector = Collector()
    root = Scope().attach(collector).attach(LogWriter(level="INFO"))

    # One summary warning per batch instead of one per bad row
    batch, flush = root.map(lambda w: Message(w.message.capitalize())).reduce(summarize)

    with ambient.using(batch):
        rows = load_rows(["1", "two", "3", "", "5"])
    flush().unwrap()

    print(f"loaded: {rows}")
    for wrr in read_all(collector).unwrap():
        print(f"collected: {wrr.message}")
    collector.close()


if __name__ == "__main__":
    main()
