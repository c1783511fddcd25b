"""Classic algorithms on sequences, strings, linked lists, trees, graphs and
grids, backtracking solvers, and small models of parking lots, a restaurant
and a shared configuration."""

__version__ = "0.1.0"