# simulations/__init__.py
"""
Monte Carlo experiments for the morris-counting repo.

Print the order-agreement percentage via:
    python -m simulations.accuracy --total-counters ... --trials ... --max-counter-value ... [--seed ...]

Compare two true-count ranges via:
    python -m simulations.compare --max-counter-value-a ... --max-counter-value-b ... [--save out.png]
"""
