#!/usr/bin/env python3
"""
Basic usage examples for pushstream.
"""

import logging
from pushstream import Stream, StreamConfig


def example_pipeline():
    """Example: filter, map and fold in one chain."""
    print("\n=== Pipeline Example ===")
    
    readings = Stream()
    totals = readings.filter(lambda r: r >= 0).map(lambda r: r * 10).fold(lambda a, b: a + b)
    totals.listen(lambda total: print(f"Running total: {total}"))
    
    for reading in [1, -3, 2, 5]:
        readings.push(reading)


def example_extrema():
    """Example: track the highest and lowest values seen."""
    print("\n=== Extrema Example ===")
    
    prices = Stream()
    prices.max().listen(lambda p: print(f"New high: {p}"))
    prices.min().listen(lambda p: print(f"New low: {p}"))
    
    for price in [3, 1, 4, 1, 5, 9, 2, 6]:
        prices.push(price)


def example_split_and_merge():
    """Example: partition a stream and merge the branches back."""
    print("\n=== Partition/Merge Example ===")
    
    requests = Stream()
    fast, slow = requests.partition(lambda ms: ms < 100)
    fast.listen(lambda ms: print(f"fast: {ms}ms"))
    slow.listen(lambda ms: print(f"slow: {ms}ms"))
    fast.merge(slow).take(3).listen(lambda ms: print(f"first three: {ms}ms"))
    
    for ms in [20, 450, 80, 120]:
        requests.push(ms)


def example_classify():
    """Example: route log lines to per-level streams."""
    print("\n=== Classify Example ===")
    
    lines = Stream()
    levels = lines.classify(lambda line: line.split(":", 1)[0])
    levels.get("ERROR").listen(lambda line: print(f"alert -> {line}"))
    
    for line in ["INFO: started", "ERROR: disk full", "WARN: slow", "ERROR: retry"]:
        lines.push(line)
    
    print(f"Levels seen: {sorted(levels)}")


def example_end():
    """Example: ending a stream."""
    print("\n=== End Example ===")
    
    events = Stream()
    events.listen(lambda e: print(f"event: {e}"))
    events.on_end(lambda: print("stream ended"))
    
    events.push("open")
    events.end()
    events.push("ignored")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    StreamConfig.set_defaults(log_dispatch=False)
    
    example_pipeline()
    example_extrema()
    example_split_and_merge()
    example_classify()
    example_end()
