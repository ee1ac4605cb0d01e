from __future__ import annotations

from kungfu import Error, Ok

from warnscope import Collector, Scanner, Scope, attach, read_all, warnf


def parse_port(scope: Scope, raw: str) -> int:
    """Never fails: bad input falls back to a default and leaves a warning."""
    try:
        return int(raw)
    except ValueError:
        warnf(scope, "invalid port %r, using 8080", raw)
        return 8080


def main() -> None:
    with Collector() as collector:
        scope = attach(Scope(), collector)

        ports = [parse_port(scope, raw) for raw in ("80", "http", "443", "")]
        print(f"ports: {ports}")

        match read_all(collector):
            case Ok(warnings):
                for wrr in warnings:
                    print(f"warning: {wrr.message}")
            case Error(err):
                print(f"error: {err!r}")

        # Scanner flavour of the same loop
        warnf(scope, "this is a warning 1")
        warnf(scope, "this is a warning 2")
        scanner = Scanner(collector)
        while scanner.advance():
            print(f"scanned: {scanner.current}")
        if scanner.error is not None:
            print(f"error: {scanner.error!r}")


if __name__ == "__main__":
    main()
