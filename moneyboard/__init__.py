"""Personal finance calculations: transactions, contracts, goals, history and extrapolation."""

__version__ = "0.1.0"