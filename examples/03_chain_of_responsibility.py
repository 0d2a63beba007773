from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from lazyseq import seq


def main() -> None:
    banner("03_chain_of_responsibility: handlers with a next continuation")

    humanize = seq([
        lambda next, ms: f"{ms} ms" if ms < 1000 else next(ms / 1000),
        lambda next, s: f"{s:g} s" if s < 60 else next(s / 60),
        lambda next, m: f"{m:g} min" if m < 60 else next(m / 60),
        lambda _next, h: f"{h:g} h",
    ]).to_chain(lambda handler, next, value: handler(next, value))

    for value in (500, 2_000, 150_000, 7_200_000):
        print(f"{value} -> {humanize(value)}")

    strict = seq([lambda next, text: next(text.strip())]).to_chain(
        lambda handler, next, text: handler(next, text)
    )
    match strict.try_call("  nobody answers  "):
        case Ok(value):
            print(f"answered: {value}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
