"""Small concurrency samples: a thread per core, a thread team, and parallel Fibonacci."""

from __future__ import annotations

import argparse
import os
import threading
from collections.abc import Sequence

_SERIAL_BELOW = 5


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, computing the two halves concurrently."""
    if n < 2:
        return n
    if n < _SERIAL_BELOW:
        return fib(n - 1) + fib(n - 2)

    result: dict[str, int] = {}

    def left() -> None:
        result["x"] = fib(n - 1)

    worker = threading.Thread(target=left)
    worker.start()
    y = fib(n - 2)
    worker.join()
    return result["x"] + y


def _run_threads(num_threads: int, make_lines) -> list[str]:
    lines: list[str] = []
    lock = threading.Lock()

    def work(index: int) -> None:
        produced = make_lines(index)
        with lock:
            lines.extend(produced)

    threads = [threading.Thread(target=work, args=(index,)) for index in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return lines


def thread_messages(num_threads: int | None = None) -> list[str]:
    """Start one thread per index; return their messages in completion order."""
    count = num_threads if num_threads is not None else (os.cpu_count() or 1)
    if count < 0:
        raise ValueError("number of threads must not be negative")
    return _run_threads(count, lambda index: [f"thread number: {index}"])


def _team_messages(num_threads: int) -> list[str]:
    return _run_threads(
        num_threads,
        lambda index: [f"Thread number = {index}", f"Number of threads = {num_threads}"],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the samples and return its exit status."""
    parser = argparse.ArgumentParser(prog="taskbench-samples")
    parser.add_argument("sample", nargs="?", choices=("threads", "team", "fib"), default="threads")
    parser.add_argument("--threads", type=int, default=None, help="number of threads")
    args = parser.parse_args(argv)

    count = args.threads if args.threads is not None else (os.cpu_count() or 1)
    if count < 0:
        parser.error("number of threads must not be negative")

    if args.sample == "fib":
        return fib(10) - 55
    if args.sample == "team":
        for line in _team_messages(count):
            print(line)
        return 0
    print(f"Number of threads = {count}")
    for line in thread_messages(count):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())