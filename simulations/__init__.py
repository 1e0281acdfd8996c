# simulations/__init__.py
"""
Monte Carlo experiments for the birthday-mc repo.

Run comparisons via:
    python -m simulations.compare repeat --event a --people 23 --trials 100000 --repeats 10
    python -m simulations.compare repeat --event b --people 77 --run-length 6 --plot
    python -m simulations.compare table --people 10 20 23 30 --trials 20000
"""
