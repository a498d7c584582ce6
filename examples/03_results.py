from __future__ import annotations

from _infra import banner, read_sensors

from kungfu import Error, Ok

from lazyseq import Seq


def main() -> None:
    banner("03_results: try_find / try_reduce return Result")

    match Seq(read_sensors()).try_find(lambda r: r.sensor == "basement"):
        case Ok(reading):
            print(f"found: {reading}")
        case Error(err):
            print(f"error: {err!r}")

    empty = Seq(read_sensors()).filter(lambda r: r.celsius > 100).map(lambda r: r.celsius)
    match empty.try_reduce(max):
        case Ok(value):
            print(f"hottest: {value}")
        case Error(err):
            print(f"error: {err!r}")

    banner("03_results: reduce raises instead")

    try:
        Seq.empty.reduce(max)
    except TypeError as exc:
        print(f"raised {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
