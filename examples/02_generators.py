from __future__ import annotations

import math

from _infra import banner, read_sensors

from lazyseq import Seq


def main() -> None:
    banner("02_generators: init + init_infinite")

    squares = Seq.init(5, lambda i: i * i)
    print(f"squares: {squares}")

    first_power = Seq.init_infinite(lambda i: 2 ** i).find_index(lambda n: n > 1000)
    print(f"first power of two above 1000 is 2**{first_power}")

    banner("02_generators: zip truncates to the shorter source")

    labelled = Seq.zip(Seq.init_infinite(lambda i: i + 1), read_sensors())
    for position, reading in labelled:
        print(f"  {position}: {reading.sensor}")

    banner("02_generators: concat mixes Seqs and bare values")

    print(Seq.concat(Seq.of(1, 2), 3, Seq.init(2, lambda i: 10 + i)).join(" "))

    banner("02_generators: includes treats NaN as itself")

    print(Seq(read_sensors()).map(lambda r: r.celsius).includes(math.nan))


if __name__ == "__main__":
    main()
