from __future__ import annotations

from _infra import banner, run, sample_orders

from lazyseq import seq


def main() -> None:
    banner("02_batching: chunk + interpose + zip")

    for batch in seq(sample_orders()).map(lambda o: o.id).chunk(5):
        print(f"batch: {batch}")

    line = seq(["extract", "transform", "load"]).interpose(" -> ").collect("".join)
    print(line)

    ranked = seq(sample_orders()).to_sorted_by("customer", "total")
    for place, order in seq(ranked).take(3).zip([1, 2, 3]).map(lambda pair: (pair[1], pair[0])):
        print(f"#{place}: {order.customer} {order.total}")


if __name__ == "__main__":
    run(main)
