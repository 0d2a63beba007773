from __future__ import annotations

from _infra import FakeOrderFeed, banner, run, sample_orders

from lazyseq import count, seq


def main() -> None:
    banner("01_quickstart: seq + map/filter + take + aggregators")

    evens = count().filter(lambda x: x % 2 == 0).map(lambda x, i: (i, x)).take(3).to_list()
    print(f"first even numbers with their index: {evens}")

    feed = FakeOrderFeed(sample_orders())
    big = seq(feed).filter(lambda order: order.total >= 30).take(2).to_list()
    # Locality: take(2) stopped pulling and released the feed.
    print(f"big orders: {[o.id for o in big]}, pulls={feed.pulls}, closed={feed.closed}")

    totals = seq(sample_orders()).group_by(lambda order: order.customer)
    for customer, orders in totals.items():
        print(f"{customer}: {seq(orders).map(lambda o: o.total).sum()}")

    print(f"last three ids: {seq(sample_orders()).take(-3).map(lambda o: o.id).to_list()}")


if __name__ == "__main__":
    run(main)
