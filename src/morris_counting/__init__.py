"""
Morris approximate counting.

    from morris_counting.counters import MorrisCounter
    from morris_counting.random_source import SeededRandomSource

    c = MorrisCounter(SeededRandomSource(seed=7))
    for _ in range(1000):
        c.increment()
    c.estimate()
"""
