from __future__ import annotations

from _infra import banner, read_sensors

from lazyseq import Seq


def main() -> None:
    banner("01_quickstart: filter + map + join, pulled on demand")

    pipeline = (
        Seq(read_sensors())
        .filter(lambda r: not r.missing)
        .map(lambda r, i: f"#{i} {r.sensor}={r.celsius:.1f}")
    )
    print("pipeline built, nothing pulled yet")
    print(pipeline.join("; "))

    banner("01_quickstart: stop early")

    hot = Seq(read_sensors()).find(lambda r: r.celsius > 25)
    print(f"first hot reading: {hot}")

    banner("01_quickstart: reduce")

    total = (
        Seq(read_sensors())
        .filter(lambda r: not r.missing)
        .reduce(lambda acc, r: acc + r.celsius, 0.0)
    )
    print(f"sum of valid readings: {total:.1f}")

    banner("01_quickstart: sort is eager")

    by_temp = Seq(read_sensors()).filter(lambda r: not r.missing).sort(key=lambda r: r.celsius)
    print([r.sensor for r in by_temp])


if __name__ == "__main__":
    main()
